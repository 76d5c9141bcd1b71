"""
Disconnect wallet use case.
"""

from uuid import UUID

from augure.domain.exceptions import EntityNotFoundError
from augure.domain.repositories.i_connected_wallet_repository import (
    IConnectedWalletRepository,
)


class DisconnectWallet:
    """
    Remove a wallet from a user's account.

    When the primary wallet is removed, the most recently connected
    remaining wallet is promoted so the user keeps exactly one primary.
    """

    def __init__(self, wallet_repository: IConnectedWalletRepository):
        self.wallet_repository = wallet_repository

    async def execute(self, user_id: UUID, wallet_id: UUID) -> None:
        """
        Raises:
            EntityNotFoundError: If wallet not found or owned by another user
        """
        wallet = await self.wallet_repository.get_by_id(wallet_id, user_id)

        if not wallet:
            raise EntityNotFoundError("Wallet")

        await self.wallet_repository.delete(wallet_id, user_id)

        if wallet.is_primary:
            remaining = await self.wallet_repository.list_by_user(user_id)
            if remaining:
                await self.wallet_repository.set_primary(remaining[0].id, user_id)
