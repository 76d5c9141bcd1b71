"""
Set primary wallet use case.
"""

from uuid import UUID

from augure.domain.entities.connected_wallet import ConnectedWallet
from augure.domain.exceptions import EntityNotFoundError
from augure.domain.repositories.i_connected_wallet_repository import (
    IConnectedWalletRepository,
)


class SetPrimaryWallet:
    """Make one of the user's wallets the primary wallet."""

    def __init__(self, wallet_repository: IConnectedWalletRepository):
        self.wallet_repository = wallet_repository

    async def execute(self, user_id: UUID, wallet_id: UUID) -> ConnectedWallet:
        """
        Raises:
            EntityNotFoundError: If wallet not found or owned by another user
        """
        wallet = await self.wallet_repository.get_by_id(wallet_id, user_id)

        if not wallet:
            raise EntityNotFoundError("Wallet")

        return await self.wallet_repository.set_primary(wallet_id, user_id)
