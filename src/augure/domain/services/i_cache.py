"""
Cache service interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class ICache(ABC):
    """Key/value cache with expiry."""

    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return cached value, None if absent or expired."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store value under key, resetting its age."""

    @abstractmethod
    def clear(self) -> None:
        """Drop every entry."""
