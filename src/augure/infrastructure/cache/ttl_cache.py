"""
In-process TTL cache for outbound API responses.

Backed by cachetools TTLCache without a size bound: an entry stays
valid while timer() < inserted_at + ttl.
"""

import math
import time
from typing import Any, Callable, Optional

from cachetools import TTLCache

from augure.domain.services.i_cache import ICache
from augure.infrastructure.monitoring import metrics

DEFAULT_TTL_SECONDS = 300.0


class InMemoryTTLCache(ICache):
    """
    Process-wide key/value cache with uniform expiry.

    Each get/set is a single dict operation, so concurrent coroutines on
    one event loop never observe a partially written entry.

    The timer is injectable so tests can move time forward without
    sleeping.
    """

    def __init__(
        self,
        ttl: float = DEFAULT_TTL_SECONDS,
        timer: Callable[[], float] = time.monotonic,
    ):
        """
        Initialize cache.

        Args:
            ttl: Entry lifetime in seconds
            timer: Clock returning seconds
        """
        if ttl <= 0:
            raise ValueError("ttl must be positive")

        self.ttl = ttl
        self._store: TTLCache = TTLCache(maxsize=math.inf, ttl=ttl, timer=timer)

    def get(self, key: str) -> Optional[Any]:
        """
        Get cached value.

        Args:
            key: Cache key

        Returns:
            Cached value or None if absent or expired
        """
        namespace = key.split(":", 1)[0]
        value = self._store.get(key)

        if value is None:
            metrics.cache_misses_total.labels(namespace=namespace).inc()
            return None

        metrics.cache_hits_total.labels(namespace=namespace).inc()
        return value

    def set(self, key: str, value: Any) -> None:
        """
        Store value.

        Args:
            key: Cache key
            value: Value to cache (None is not cacheable)
        """
        self._store[key] = value

    def clear(self) -> None:
        """Drop every entry."""
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)
