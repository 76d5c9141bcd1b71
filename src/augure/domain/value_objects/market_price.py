"""
Market price value objects.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CoinPrice:
    """Spot USD price with 24h change in percent."""

    usd: float
    usd_24h_change: Optional[float] = None


@dataclass(frozen=True)
class PricePoint:
    """Historical price sample, timestamp in epoch milliseconds."""

    timestamp: int
    price: float
