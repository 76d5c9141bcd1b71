"""
Market data and transaction sources.
"""

from augure.infrastructure.market_data.coingecko_client import CoinGeckoClient
from augure.infrastructure.market_data.sample_transaction_source import (
    SampleTransactionSource,
)

__all__ = ["CoinGeckoClient", "SampleTransactionSource"]
