"""
Get user profile use case.
"""

from dataclasses import dataclass, field
from typing import Optional

from augure.application.use_cases.list_wallets import ListWallets
from augure.domain.entities.connected_wallet import ConnectedWallet
from augure.domain.entities.investment_preferences import InvestmentPreferences
from augure.domain.entities.user import User
from augure.domain.repositories.i_investment_preferences_repository import (
    IInvestmentPreferencesRepository,
)


@dataclass
class UserProfile:
    """User with preferences and connected wallets."""

    user: User
    preferences: Optional[InvestmentPreferences] = None
    wallets: list[ConnectedWallet] = field(default_factory=list)


class GetUserProfile:
    """
    Assemble the profile of an authenticated user.

    Wallets come from ListWallets and carry last_sync.
    """

    def __init__(
        self,
        preferences_repository: IInvestmentPreferencesRepository,
        list_wallets: ListWallets,
    ):
        self.preferences_repository = preferences_repository
        self.list_wallets = list_wallets

    async def execute(self, user: User) -> UserProfile:
        preferences = await self.preferences_repository.get_by_user(user.id)
        wallets = await self.list_wallets.execute(user.id)

        return UserProfile(user=user, preferences=preferences, wallets=wallets)
