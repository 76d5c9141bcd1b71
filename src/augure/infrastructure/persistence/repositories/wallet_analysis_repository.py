"""
Wallet analysis repository implementation.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from augure.domain.clock import utc_now
from augure.domain.entities.wallet_analysis import WalletAnalysis
from augure.domain.repositories.i_wallet_analysis_repository import (
    IWalletAnalysisRepository,
)
from augure.domain.value_objects.analysis_data import AnalysisData
from augure.domain.value_objects.blockchain import Blockchain
from augure.infrastructure.monitoring.logger import get_logger
from augure.infrastructure.persistence.models import WalletAnalysisModel

logger = get_logger(__name__)


class WalletAnalysisRepository(IWalletAnalysisRepository):
    """
    SQLAlchemy implementation of wallet analysis repository.

    One row per (user_id, wallet_address), enforced by the
    uq_analysis_per_wallet constraint. upsert() inserts inside a
    savepoint and falls back to updating the row a concurrent writer
    created first.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def upsert(self, analysis: WalletAnalysis) -> WalletAnalysis:
        """
        Create or update the analysis for (user_id, wallet_address).

        Args:
            analysis: Analysis to store

        Returns:
            Stored analysis with its persistent id
        """
        model = await self._get_by_wallet(analysis.user_id, analysis.wallet_address)

        if model is None:
            model = WalletAnalysisModel(
                id=analysis.id,
                user_id=analysis.user_id,
                wallet_address=analysis.wallet_address,
                blockchain=analysis.blockchain.value,
                analysis_data=analysis.analysis_data.to_dict(),
                ai_insights=analysis.ai_insights,
                created_at=analysis.created_at,
                updated_at=analysis.updated_at,
            )
            try:
                async with self.session.begin_nested():
                    self.session.add(model)
                    await self.session.flush()
                await self.session.refresh(model)
                return self._to_entity(model)
            except IntegrityError:
                logger.info(
                    "Concurrent analysis insert, updating existing row",
                    extra={"wallet_address": analysis.wallet_address},
                )
                model = await self._get_by_wallet(
                    analysis.user_id, analysis.wallet_address
                )
                if model is None:
                    raise

        model.blockchain = analysis.blockchain.value
        model.analysis_data = analysis.analysis_data.to_dict()
        model.ai_insights = analysis.ai_insights
        model.updated_at = utc_now()

        await self.session.flush()
        await self.session.refresh(model)

        return self._to_entity(model)

    async def get_by_id(
        self, analysis_id: UUID, user_id: UUID
    ) -> Optional[WalletAnalysis]:
        stmt = select(WalletAnalysisModel).where(
            WalletAnalysisModel.id == analysis_id,
            WalletAnalysisModel.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_by_user(
        self,
        user_id: UUID,
        offset: int,
        limit: int,
        blockchain: Optional[Blockchain] = None,
    ) -> tuple[list[WalletAnalysis], int]:
        """
        Page through a user's analyses, newest first.

        Args:
            user_id: Owner ID
            offset: Rows to skip
            limit: Maximum rows to return
            blockchain: Optional chain filter

        Returns:
            Tuple of (page of analyses, total matching rows)
        """
        conditions = [WalletAnalysisModel.user_id == user_id]
        if blockchain is not None:
            conditions.append(WalletAnalysisModel.blockchain == blockchain.value)

        count_stmt = select(func.count()).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar_one()

        stmt = (
            select(WalletAnalysisModel)
            .where(*conditions)
            .order_by(WalletAnalysisModel.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        analyses = [self._to_entity(model) for model in result.scalars().all()]

        return analyses, total

    async def last_analyzed_at(self, user_id: UUID) -> dict[tuple[str, str], datetime]:
        stmt = (
            select(
                WalletAnalysisModel.wallet_address,
                WalletAnalysisModel.blockchain,
                func.max(WalletAnalysisModel.updated_at),
            )
            .where(WalletAnalysisModel.user_id == user_id)
            .group_by(WalletAnalysisModel.wallet_address, WalletAnalysisModel.blockchain)
        )
        result = await self.session.execute(stmt)
        return {(address, chain): analyzed for address, chain, analyzed in result.all()}

    async def _get_by_wallet(
        self, user_id: UUID, wallet_address: str
    ) -> Optional[WalletAnalysisModel]:
        stmt = select(WalletAnalysisModel).where(
            WalletAnalysisModel.user_id == user_id,
            WalletAnalysisModel.wallet_address == wallet_address,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: WalletAnalysisModel) -> WalletAnalysis:
        """Convert WalletAnalysisModel to WalletAnalysis entity."""
        return WalletAnalysis(
            id=model.id,
            user_id=model.user_id,
            wallet_address=model.wallet_address,
            blockchain=Blockchain(model.blockchain),
            analysis_data=AnalysisData.from_dict(model.analysis_data),
            ai_insights=model.ai_insights,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
