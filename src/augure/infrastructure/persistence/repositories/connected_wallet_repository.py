"""
Connected wallet repository implementation.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from augure.domain.entities.connected_wallet import ConnectedWallet
from augure.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from augure.domain.repositories.i_connected_wallet_repository import (
    IConnectedWalletRepository,
)
from augure.domain.value_objects.blockchain import Blockchain
from augure.infrastructure.persistence.models import ConnectedWalletModel


class ConnectedWalletRepository(IConnectedWalletRepository):
    """
    SQLAlchemy implementation of connected wallet repository.

    Every lookup is scoped to the owning user.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def list_by_user(self, user_id: UUID) -> list[ConnectedWallet]:
        stmt = (
            select(ConnectedWalletModel)
            .where(ConnectedWalletModel.user_id == user_id)
            .order_by(ConnectedWalletModel.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().all()]

    async def get_by_id(
        self, wallet_id: UUID, user_id: UUID
    ) -> Optional[ConnectedWallet]:
        model = await self._get_model(wallet_id, user_id)
        return self._to_entity(model) if model else None

    async def get_by_address(
        self, user_id: UUID, wallet_address: str
    ) -> Optional[ConnectedWallet]:
        stmt = select(ConnectedWalletModel).where(
            ConnectedWalletModel.user_id == user_id,
            ConnectedWalletModel.wallet_address == wallet_address,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def count_by_user(self, user_id: UUID) -> int:
        stmt = select(func.count()).where(ConnectedWalletModel.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def create(self, wallet: ConnectedWallet) -> ConnectedWallet:
        """
        Insert wallet inside a savepoint.

        Args:
            wallet: Wallet entity to store

        Returns:
            Stored wallet entity

        Raises:
            DuplicateEntityError: If (user_id, wallet_address) exists
        """
        model = ConnectedWalletModel(
            id=wallet.id,
            user_id=wallet.user_id,
            wallet_address=wallet.wallet_address,
            blockchain=wallet.blockchain.value,
            nickname=wallet.nickname,
            is_primary=wallet.is_primary,
            created_at=wallet.created_at,
        )

        try:
            async with self.session.begin_nested():
                self.session.add(model)
                await self.session.flush()
        except IntegrityError:
            raise DuplicateEntityError(
                "ConnectedWallet", f"address {wallet.wallet_address}"
            )

        await self.session.refresh(model)
        return self._to_entity(model)

    async def delete(self, wallet_id: UUID, user_id: UUID) -> bool:
        result = await self.session.execute(
            delete(ConnectedWalletModel).where(
                ConnectedWalletModel.id == wallet_id,
                ConnectedWalletModel.user_id == user_id,
            )
        )
        await self.session.flush()
        return result.rowcount > 0

    async def set_primary(self, wallet_id: UUID, user_id: UUID) -> ConnectedWallet:
        """
        Clear the user's primary flags and set it on one wallet.

        Both statements run in the caller's transaction, so readers never
        see two primary wallets.

        Raises:
            EntityNotFoundError: If wallet is not owned by user
        """
        model = await self._get_model(wallet_id, user_id)

        if not model:
            raise EntityNotFoundError("Wallet")

        await self.session.execute(
            update(ConnectedWalletModel)
            .where(ConnectedWalletModel.user_id == user_id)
            .values(is_primary=False)
        )
        await self.session.execute(
            update(ConnectedWalletModel)
            .where(ConnectedWalletModel.id == wallet_id)
            .values(is_primary=True)
        )
        await self.session.flush()
        await self.session.refresh(model)

        return self._to_entity(model)

    async def _get_model(
        self, wallet_id: UUID, user_id: UUID
    ) -> Optional[ConnectedWalletModel]:
        stmt = select(ConnectedWalletModel).where(
            ConnectedWalletModel.id == wallet_id,
            ConnectedWalletModel.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: ConnectedWalletModel) -> ConnectedWallet:
        """Convert ConnectedWalletModel to ConnectedWallet entity."""
        return ConnectedWallet(
            id=model.id,
            user_id=model.user_id,
            wallet_address=model.wallet_address,
            blockchain=Blockchain(model.blockchain),
            nickname=model.nickname,
            is_primary=model.is_primary,
            created_at=model.created_at,
        )
