"""
Connect wallet use case.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from augure.domain.entities.connected_wallet import ConnectedWallet
from augure.domain.exceptions import (
    ConflictError,
    DuplicateEntityError,
    ValidationError,
)
from augure.domain.repositories.i_connected_wallet_repository import (
    IConnectedWalletRepository,
)
from augure.domain.value_objects.blockchain import Blockchain, validate_wallet_address
from augure.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ConnectWalletCommand:
    """Command to connect a wallet address."""

    user_id: UUID
    wallet_address: str
    blockchain: Blockchain
    nickname: Optional[str] = None


class ConnectWallet:
    """
    Use case for connecting a wallet to an account.

    Business rules:
    - Address must match the chain's address format
    - A user connects a given address once
    - The first connected wallet becomes primary
    """

    def __init__(self, wallet_repository: IConnectedWalletRepository):
        """
        Initialize use case.

        Args:
            wallet_repository: Connected wallet repository
        """
        self.wallet_repository = wallet_repository

    async def execute(self, command: ConnectWalletCommand) -> ConnectedWallet:
        """
        Connect wallet.

        Args:
            command: Wallet to connect

        Returns:
            Stored wallet

        Raises:
            ValidationError: If address or nickname is invalid
            ConflictError: If the address is already connected
        """
        if not validate_wallet_address(command.wallet_address, command.blockchain):
            raise ValidationError(field=None, reason="Invalid wallet address")

        existing = await self.wallet_repository.get_by_address(
            command.user_id, command.wallet_address
        )
        if existing:
            raise ConflictError("Wallet already connected")

        is_first = await self.wallet_repository.count_by_user(command.user_id) == 0

        try:
            wallet = ConnectedWallet(
                user_id=command.user_id,
                wallet_address=command.wallet_address,
                blockchain=command.blockchain,
                nickname=command.nickname,
                is_primary=is_first,
            )
        except ValueError as e:
            raise ValidationError(field=None, reason=str(e))

        try:
            wallet = await self.wallet_repository.create(wallet)
        except DuplicateEntityError:
            raise ConflictError("Wallet already connected")

        logger.info(
            "Wallet connected",
            extra={
                "user_id": str(command.user_id),
                "blockchain": wallet.blockchain.value,
                "is_primary": wallet.is_primary,
            },
        )

        return wallet
