"""
Repository interfaces.
"""

from augure.domain.repositories.i_connected_wallet_repository import (
    IConnectedWalletRepository,
)
from augure.domain.repositories.i_investment_preferences_repository import (
    IInvestmentPreferencesRepository,
)
from augure.domain.repositories.i_user_repository import IUserRepository
from augure.domain.repositories.i_wallet_analysis_repository import (
    IWalletAnalysisRepository,
)

__all__ = [
    "IConnectedWalletRepository",
    "IInvestmentPreferencesRepository",
    "IUserRepository",
    "IWalletAnalysisRepository",
]
