"""
Connected wallet repository interface.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from augure.domain.entities.connected_wallet import ConnectedWallet


class IConnectedWalletRepository(ABC):
    """Interface for connected wallet persistence."""

    @abstractmethod
    async def list_by_user(self, user_id: UUID) -> list[ConnectedWallet]:
        """
        List a user's wallets, newest first.

        Args:
            user_id: Owner ID

        Returns:
            Wallets ordered by created_at descending
        """

    @abstractmethod
    async def get_by_id(
        self, wallet_id: UUID, user_id: UUID
    ) -> Optional[ConnectedWallet]:
        """
        Get a wallet owned by user.

        Returns:
            Wallet if it exists and belongs to user, None otherwise
        """

    @abstractmethod
    async def get_by_address(
        self, user_id: UUID, wallet_address: str
    ) -> Optional[ConnectedWallet]:
        """Get a user's wallet by address."""

    @abstractmethod
    async def count_by_user(self, user_id: UUID) -> int:
        """Number of wallets connected by user."""

    @abstractmethod
    async def create(self, wallet: ConnectedWallet) -> ConnectedWallet:
        """
        Insert a wallet.

        Raises:
            DuplicateEntityError: If the user already connected the address
        """

    @abstractmethod
    async def delete(self, wallet_id: UUID, user_id: UUID) -> bool:
        """
        Delete a wallet owned by user.

        Returns:
            True if deleted, False if not found
        """

    @abstractmethod
    async def set_primary(self, wallet_id: UUID, user_id: UUID) -> ConnectedWallet:
        """
        Make wallet the user's only primary wallet.

        Raises:
            EntityNotFoundError: If wallet is not owned by user
        """
