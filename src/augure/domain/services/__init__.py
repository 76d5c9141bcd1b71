"""
Domain services and service interfaces.
"""

from augure.domain.services.i_cache import ICache
from augure.domain.services.i_insight_generator import IInsightGenerator
from augure.domain.services.i_market_data_client import IMarketDataClient
from augure.domain.services.i_password_hasher import IPasswordHasher
from augure.domain.services.i_transaction_source import ITransactionSource
from augure.domain.services.profit_loss_calculator import calculate_profit_loss

__all__ = [
    "ICache",
    "IInsightGenerator",
    "IMarketDataClient",
    "IPasswordHasher",
    "ITransactionSource",
    "calculate_profit_loss",
]
