"""
Repository implementations.
"""

from augure.infrastructure.persistence.repositories.connected_wallet_repository import (
    ConnectedWalletRepository,
)
from augure.infrastructure.persistence.repositories.investment_preferences_repository import (  # noqa: E501
    InvestmentPreferencesRepository,
)
from augure.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)
from augure.infrastructure.persistence.repositories.wallet_analysis_repository import (
    WalletAnalysisRepository,
)

__all__ = [
    "UserRepository",
    "InvestmentPreferencesRepository",
    "ConnectedWalletRepository",
    "WalletAnalysisRepository",
]
