"""
Get investment preferences use case.
"""

from typing import Optional
from uuid import UUID

from augure.domain.entities.investment_preferences import InvestmentPreferences
from augure.domain.repositories.i_investment_preferences_repository import (
    IInvestmentPreferencesRepository,
)


class GetPreferences:
    """Load a user's investment preferences, None when never set."""

    def __init__(self, preferences_repository: IInvestmentPreferencesRepository):
        self.preferences_repository = preferences_repository

    async def execute(self, user_id: UUID) -> Optional[InvestmentPreferences]:
        return await self.preferences_repository.get_by_user(user_id)
