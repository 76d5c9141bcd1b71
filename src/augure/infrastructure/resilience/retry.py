"""
Retry pattern with flat exponential backoff.

Retries an async operation after a failure, waiting initial_delay, then
initial_delay * multiplier, and so on. There is no jitter and no cap.
When retries run out the last exception is re-raised unchanged, so
callers see the same error type and message a single attempt would
have produced.
"""

import asyncio
from dataclasses import dataclass
from functools import wraps
from typing import Any, Awaitable, Callable, Optional

from augure.infrastructure.monitoring import metrics
from augure.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


@dataclass
class RetryConfig:
    """Configuration for retry behavior."""

    max_retries: int = 3
    """Retries after the first attempt (3 means 4 attempts in total)"""

    initial_delay: float = 1.0
    """Delay before the first retry in seconds"""

    backoff_multiplier: float = 2.0
    """Factor applied to the delay after each retry"""

    retry_on: tuple = (Exception,)
    """Exception types to retry on"""

    def __post_init__(self):
        if self.max_retries < 0:
            raise ValueError("max_retries cannot be negative")
        if self.initial_delay < 0:
            raise ValueError("initial_delay cannot be negative")


class Retry:
    """
    Retry handler for async operations.

    Each external integration owns its own instance, so attempt budgets
    are never shared.

    Example:
        retry = Retry(RetryConfig(max_retries=3), name="coingecko")

        @retry.decorator
        async def fetch_prices():
            response = await client.get(url)
            response.raise_for_status()
            return response.json()

        # Or use directly
        result = await retry.execute_async(fetch_prices)
    """

    def __init__(
        self,
        config: Optional[RetryConfig] = None,
        name: str = "operation",
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        """
        Initialize retry handler.

        Args:
            config: Retry configuration
            name: Label used in logs and metrics
            sleep: Async sleep function (replaceable in tests)
        """
        self.config = config or RetryConfig()
        self.name = name
        self._sleep = sleep

    def delays(self) -> list[float]:
        """Backoff schedule, one delay per retry."""
        return [
            self.config.initial_delay * (self.config.backoff_multiplier**retry)
            for retry in range(self.config.max_retries)
        ]

    async def execute_async(self, func: Callable, *args, **kwargs) -> Any:
        """
        Execute async function with retry logic.

        Args:
            func: Async function to execute
            *args: Positional arguments for func
            **kwargs: Keyword arguments for func

        Returns:
            Function result

        Raises:
            Exception: The last failure, unchanged, once retries are exhausted
        """
        retries_left = self.config.max_retries
        delay = self.config.initial_delay
        attempt = 1

        while True:
            try:
                result = await func(*args, **kwargs)
            except self.config.retry_on as e:
                if retries_left <= 0:
                    if attempt > 1:
                        logger.error(
                            f"{self.name} failed after {attempt} attempts: "
                            f"{type(e).__name__}: {e}"
                        )
                    raise

                logger.warning(
                    f"{self.name} retry, {retries_left} attempts remaining. "
                    f"{type(e).__name__}: {e}. Waiting {delay:.2f}s..."
                )
                metrics.retry_attempts_total.labels(operation=self.name).inc()

                await self._sleep(delay)
                retries_left -= 1
                delay *= self.config.backoff_multiplier
                attempt += 1
                continue

            if attempt > 1:
                logger.info(f"{self.name} succeeded on attempt {attempt}")
            return result

    def decorator(self, func: Callable) -> Callable:
        """
        Decorator for retry logic on coroutine functions.

        Example:
            retry = Retry(RetryConfig(max_retries=3))

            @retry.decorator
            async def my_function():
                return await api_call()
        """
        if not asyncio.iscoroutinefunction(func):
            raise TypeError("Retry.decorator only supports async functions")

        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            return await self.execute_async(func, *args, **kwargs)

        return async_wrapper


def with_retry(config: Optional[RetryConfig] = None, name: str = "operation"):
    """
    Decorator factory for retry logic.

    Example:
        @with_retry(RetryConfig(max_retries=5, initial_delay=0.5))
        async def fetch_data():
            return (await client.get("https://api.example.com")).json()
    """
    retry = Retry(config or RetryConfig(), name=name)
    return retry.decorator


__all__ = [
    "Retry",
    "RetryConfig",
    "with_retry",
]
