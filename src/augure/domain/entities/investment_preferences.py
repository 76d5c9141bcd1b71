"""
InvestmentPreferences entity - a user's self-assessed investor profile.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from augure.domain.clock import utc_now

MIN_SCORE = 1
MAX_SCORE = 10

# Ordered as presented to users and in insight prompts
PREFERENCE_FIELDS: tuple[str, ...] = (
    "risk_aversion",
    "volatility_tolerance",
    "growth_focus",
    "crypto_experience",
    "innovation_trust",
    "impact_interest",
    "diversification",
    "holding_patience",
    "monitoring_frequency",
    "advice_openness",
)


@dataclass
class InvestmentPreferences:
    """
    Ten integer scores in [1, 10], one row per user.

    Created on first write with every score present, then partially
    updated through apply_updates().
    """

    user_id: UUID
    risk_aversion: int
    volatility_tolerance: int
    growth_focus: int
    crypto_experience: int
    innovation_trust: int
    impact_interest: int
    diversification: int
    holding_patience: int
    monitoring_frequency: int
    advice_openness: int
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        """Validate every score is within range."""
        for name in PREFERENCE_FIELDS:
            self._validate_score(name, getattr(self, name))

    @staticmethod
    def _validate_score(name: str, value) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"{name} must be an integer")
        if not MIN_SCORE <= value <= MAX_SCORE:
            raise ValueError(f"{name} must be between {MIN_SCORE} and {MAX_SCORE}")

    @property
    def average_risk_score(self) -> float:
        """
        Risk appetite indicator, higher means more conservative.

        Volatility tolerance and growth focus are inverted so that all
        three components point the same way.
        """
        return (
            self.risk_aversion
            + (10 - self.volatility_tolerance)
            + (10 - self.growth_focus)
        ) / 3

    @property
    def investor_profile(self) -> str:
        """Classify as conservative, balanced or aggressive."""
        score = self.average_risk_score
        if score >= 7:
            return "conservative"
        if score >= 4:
            return "balanced"
        return "aggressive"

    def apply_updates(self, updates: dict[str, Optional[int]]) -> None:
        """
        Apply partial score updates in place.

        Args:
            updates: Mapping of preference field to new score; None values
                are ignored
        """
        for name, value in updates.items():
            if name not in PREFERENCE_FIELDS:
                raise ValueError(f"Unknown preference field: {name}")
            if value is None:
                continue
            self._validate_score(name, value)
            setattr(self, name, value)
        self.updated_at = utc_now()

    def scores(self) -> dict[str, int]:
        """Return the ten scores keyed by field name."""
        return {name: getattr(self, name) for name in PREFERENCE_FIELDS}
