"""
User profile API schemas.
"""

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import Field

from augure.domain.entities.investment_preferences import InvestmentPreferences
from augure.domain.entities.user import User
from augure.presentation.schemas.base import CamelModel
from augure.presentation.schemas.wallet_schemas import WalletResponse

Score = Annotated[int, Field(ge=1, le=10)]


class UserResponse(CamelModel):
    """Public account identity."""

    id: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(id=str(user.id), email=user.email)


class PreferenceScores(CamelModel):
    """All ten investment preference scores."""

    risk_aversion: Score
    volatility_tolerance: Score
    growth_focus: Score
    crypto_experience: Score
    innovation_trust: Score
    impact_interest: Score
    diversification: Score
    holding_patience: Score
    monitoring_frequency: Score
    advice_openness: Score


class UpdatePreferencesRequest(CamelModel):
    """
    Partial preference update.

    Omitted scores keep their stored value. The first update must carry
    all ten.
    """

    risk_aversion: Optional[Score] = None
    volatility_tolerance: Optional[Score] = None
    growth_focus: Optional[Score] = None
    crypto_experience: Optional[Score] = None
    innovation_trust: Optional[Score] = None
    impact_interest: Optional[Score] = None
    diversification: Optional[Score] = None
    holding_patience: Optional[Score] = None
    monitoring_frequency: Optional[Score] = None
    advice_openness: Optional[Score] = None


class PreferencesResponse(PreferenceScores):
    """Stored preferences with derived investor profile."""

    investor_profile: str
    updated_at: datetime

    @classmethod
    def from_entity(cls, preferences: InvestmentPreferences) -> "PreferencesResponse":
        return cls(
            **preferences.scores(),
            investor_profile=preferences.investor_profile,
            updated_at=preferences.updated_at,
        )


class PreferencesEnvelope(CamelModel):
    """Preferences, null when never set."""

    preferences: Optional[PreferencesResponse] = None


class ProfileResponse(CamelModel):
    """User with preferences and wallets."""

    user: UserResponse
    preferences: Optional[PreferencesResponse] = None
    wallets: List[WalletResponse] = Field(default_factory=list)
