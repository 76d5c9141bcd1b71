"""
Value objects for Augure domain.
"""

from augure.domain.value_objects.analysis_data import (
    ANALYSIS_DATA_SCHEMA_VERSION,
    AnalysisData,
)
from augure.domain.value_objects.blockchain import (
    Blockchain,
    validate_wallet_address,
)
from augure.domain.value_objects.market_price import CoinPrice, PricePoint
from augure.domain.value_objects.profit_loss import ProfitLossResult
from augure.domain.value_objects.transaction import Transaction

__all__ = [
    "ANALYSIS_DATA_SCHEMA_VERSION",
    "AnalysisData",
    "Blockchain",
    "validate_wallet_address",
    "CoinPrice",
    "PricePoint",
    "ProfitLossResult",
    "Transaction",
]
