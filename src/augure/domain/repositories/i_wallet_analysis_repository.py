"""
Wallet analysis repository interface.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from augure.domain.entities.wallet_analysis import WalletAnalysis
from augure.domain.value_objects.blockchain import Blockchain


class IWalletAnalysisRepository(ABC):
    """Interface for wallet analysis persistence."""

    @abstractmethod
    async def upsert(self, analysis: WalletAnalysis) -> WalletAnalysis:
        """
        Create or update the analysis for (user_id, wallet_address).

        When a row already exists for the pair it is updated in place and
        keeps its id. Concurrent callers converge on a single row.

        Args:
            analysis: Analysis to store

        Returns:
            Stored analysis with its persistent id
        """

    @abstractmethod
    async def get_by_id(
        self, analysis_id: UUID, user_id: UUID
    ) -> Optional[WalletAnalysis]:
        """Get an analysis owned by user, None otherwise."""

    @abstractmethod
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

    @abstractmethod
    async def last_analyzed_at(self, user_id: UUID) -> dict[tuple[str, str], datetime]:
        """
        Latest analysis time per (wallet_address, blockchain) for a user.

        Returns:
            Mapping keyed by (wallet_address, blockchain value)
        """
