"""
CoinGecko market data client.

Fetches spot and historical USD prices with caching and retries, and
manages its HTTP client lifecycle lazily.
"""

import asyncio
import time
from typing import Any, Optional

import httpx

from augure.domain.exceptions import MarketDataError, ValidationError
from augure.domain.services.i_cache import ICache
from augure.domain.services.i_market_data_client import IMarketDataClient
from augure.domain.value_objects.blockchain import Blockchain
from augure.domain.value_objects.market_price import CoinPrice, PricePoint
from augure.infrastructure.monitoring import metrics
from augure.infrastructure.monitoring.logger import get_logger
from augure.infrastructure.resilience.retry import Retry

logger = get_logger(__name__)

CURRENT_PRICES_CACHE_KEY = "prices:current"
SUPPORTED_COINS: tuple[str, ...] = tuple(chain.value for chain in Blockchain)


class CoinGeckoClient(IMarketDataClient):
    """
    Price lookups against the CoinGecko v3 API.

    Design:
    - Client is lazily initialized on first use
    - Lock ensures single client per instance
    - Every request goes through this client's own Retry instance
    - Responses are cached in the injected cache, keyed per query
    """

    SERVICE_NAME = "coingecko"

    def __init__(
        self,
        base_url: str,
        cache: ICache,
        retry: Retry,
        api_key: Optional[str] = None,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize CoinGecko client.

        Args:
            base_url: API base URL (e.g. https://api.coingecko.com/api/v3)
            cache: Response cache
            retry: Retry policy for outbound requests
            api_key: Optional demo API key
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests)
        """
        self.base_url = base_url.rstrip("/")
        self.cache = cache
        self.retry = retry
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._lock = asyncio.Lock()

    async def _ensure_client(self) -> httpx.AsyncClient:
        """
        Ensure HTTP client is initialized.

        Returns:
            Initialized AsyncClient instance
        """
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    headers = {"Accept": "application/json"}
                    if self.api_key:
                        headers["x-cg-demo-api-key"] = self.api_key

                    self._client = httpx.AsyncClient(
                        base_url=self.base_url,
                        headers=headers,
                        timeout=self.timeout,
                        transport=self._transport,
                        limits=httpx.Limits(
                            max_connections=10,
                            max_keepalive_connections=5,
                        ),
                    )
        return self._client

    async def close(self) -> None:
        """Close HTTP client and cleanup resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _request(self, path: str, params: dict[str, Any]) -> Any:
        """
        Single GET attempt.

        Raises:
            MarketDataError: On non-2xx status, network error or bad JSON
        """
        client = await self._ensure_client()
        start_time = time.time()

        try:
            response = await client.get(path, params=params)
        except httpx.RequestError as e:
            metrics.external_requests_total.labels(
                service=self.SERVICE_NAME, status="network_error"
            ).inc()
            raise MarketDataError(f"CoinGecko request failed: {e}") from e
        finally:
            metrics.external_request_duration_seconds.labels(
                service=self.SERVICE_NAME
            ).observe(time.time() - start_time)

        metrics.external_requests_total.labels(
            service=self.SERVICE_NAME, status=str(response.status_code)
        ).inc()

        if not response.is_success:
            raise MarketDataError(f"CoinGecko API error: {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise MarketDataError(f"Invalid CoinGecko response: {e}") from e

    async def _get_json(self, path: str, params: dict[str, Any]) -> Any:
        """GET with retries."""
        return await self.retry.execute_async(self._request, path, params)

    async def get_current_prices(self) -> dict[str, CoinPrice]:
        """
        Get spot USD prices with 24h change for bitcoin and ethereum.

        Returns:
            Mapping of coin id to CoinPrice; coins missing upstream are
            absent from the mapping

        Raises:
            MarketDataError: If the API fails after retries
        """
        cached = self.cache.get(CURRENT_PRICES_CACHE_KEY)
        if cached is not None:
            return cached

        data = await self._get_json(
            "/simple/price",
            {
                "ids": ",".join(SUPPORTED_COINS),
                "vs_currencies": "usd",
                "include_24hr_change": "true",
            },
        )

        prices: dict[str, CoinPrice] = {}
        for coin in SUPPORTED_COINS:
            entry = data.get(coin) if isinstance(data, dict) else None
            if not entry or entry.get("usd") is None:
                continue
            change = entry.get("usd_24h_change")
            prices[coin] = CoinPrice(
                usd=float(entry["usd"]),
                usd_24h_change=float(change) if change is not None else None,
            )

        self.cache.set(CURRENT_PRICES_CACHE_KEY, prices)
        logger.debug(f"Fetched current prices for {sorted(prices)}")
        return prices

    async def get_coin_price(self, coin: Blockchain) -> float:
        """
        Get spot USD price for one coin.

        Args:
            coin: Coin to price

        Returns:
            USD price

        Raises:
            MarketDataError: If the price is absent or the API fails
        """
        coin = Blockchain(coin)
        prices = await self.get_current_prices()
        price = prices.get(coin.value)

        if price is None:
            raise MarketDataError(f"Price not available for {coin.value}")

        return price.usd

    async def get_historical_prices(
        self, coin: Blockchain, days: int = 30
    ) -> list[PricePoint]:
        """
        Get USD price series for the last `days` days.

        Args:
            coin: Coin to price
            days: Number of days to cover

        Returns:
            Price points in upstream order

        Raises:
            ValidationError: If days is not positive
            MarketDataError: If the API fails after retries
        """
        coin = Blockchain(coin)
        if days < 1:
            raise ValidationError("days", "must be at least 1")

        cache_key = f"history:{coin.value}:{days}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        data = await self._get_json(
            f"/coins/{coin.value}/market_chart",
            {"vs_currency": "usd", "days": days},
        )

        try:
            points = [
                PricePoint(timestamp=int(ts), price=float(price))
                for ts, price in data.get("prices", [])
            ]
        except (AttributeError, TypeError, ValueError) as e:
            raise MarketDataError(f"Invalid CoinGecko response: {e}") from e

        self.cache.set(cache_key, points)
        return points
