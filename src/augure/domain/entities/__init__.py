"""
Domain entities.
"""

from augure.domain.entities.connected_wallet import ConnectedWallet
from augure.domain.entities.investment_preferences import (
    PREFERENCE_FIELDS,
    InvestmentPreferences,
)
from augure.domain.entities.user import User
from augure.domain.entities.wallet_analysis import WalletAnalysis

__all__ = [
    "ConnectedWallet",
    "InvestmentPreferences",
    "PREFERENCE_FIELDS",
    "User",
    "WalletAnalysis",
]
