"""
Investment preferences repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from augure.domain.entities.investment_preferences import InvestmentPreferences


class IInvestmentPreferencesRepository(ABC):
    """Interface for investment preferences persistence."""

    @abstractmethod
    async def get_by_user(self, user_id: UUID) -> Optional[InvestmentPreferences]:
        """Get a user's preferences, None if never saved."""

    @abstractmethod
    async def create(
        self, preferences: InvestmentPreferences
    ) -> InvestmentPreferences:
        """Insert preferences for a user without any."""

    @abstractmethod
    async def update(
        self, preferences: InvestmentPreferences
    ) -> InvestmentPreferences:
        """Overwrite a user's stored preferences."""
