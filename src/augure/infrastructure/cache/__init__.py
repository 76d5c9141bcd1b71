"""
Caching infrastructure.
"""

from augure.infrastructure.cache.ttl_cache import InMemoryTTLCache

__all__ = ["InMemoryTTLCache"]
