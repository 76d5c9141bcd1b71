"""
Market data client interface.
"""

from abc import ABC, abstractmethod

from augure.domain.value_objects.blockchain import Blockchain
from augure.domain.value_objects.market_price import CoinPrice, PricePoint


class IMarketDataClient(ABC):
    """Interface for USD price lookups."""

    @abstractmethod
    async def get_current_prices(self) -> dict[str, CoinPrice]:
        """
        Get spot prices for every supported coin.

        Returns:
            Mapping of coin id (bitcoin, ethereum) to CoinPrice

        Raises:
            MarketDataError: If the upstream API fails
        """

    @abstractmethod
    async def get_coin_price(self, coin: Blockchain) -> float:
        """
        Get spot USD price for one coin.

        Raises:
            MarketDataError: If the price is unavailable
        """

    @abstractmethod
    async def get_historical_prices(
        self, coin: Blockchain, days: int = 30
    ) -> list[PricePoint]:
        """
        Get a price series covering the last `days` days.

        Raises:
            MarketDataError: If the upstream API fails
        """

    async def close(self) -> None:
        """Release network resources."""
