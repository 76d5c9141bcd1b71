"""
Password hasher interface.
"""

import asyncio
from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """
    One-way password hashing.

    Key derivation is CPU bound; async callers use ``hash_async`` and
    ``verify_async``, which run it in a worker thread so the event loop
    keeps serving other requests.
    """

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return an encoded hash including salt and parameters."""

    @abstractmethod
    def verify(self, password: str, encoded: str) -> bool:
        """Check password against an encoded hash."""

    async def hash_async(self, password: str) -> str:
        return await asyncio.to_thread(self.hash, password)

    async def verify_async(self, password: str, encoded: str) -> bool:
        return await asyncio.to_thread(self.verify, password, encoded)
