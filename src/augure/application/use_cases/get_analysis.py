"""
Get analysis use case.
"""

from uuid import UUID

from augure.domain.entities.wallet_analysis import WalletAnalysis
from augure.domain.exceptions import EntityNotFoundError
from augure.domain.repositories.i_wallet_analysis_repository import (
    IWalletAnalysisRepository,
)


class GetAnalysis:
    """Load a single analysis owned by the user."""

    def __init__(self, analysis_repository: IWalletAnalysisRepository):
        self.analysis_repository = analysis_repository

    async def execute(self, user_id: UUID, analysis_id: UUID) -> WalletAnalysis:
        """
        Raises:
            EntityNotFoundError: If absent or owned by another user
        """
        analysis = await self.analysis_repository.get_by_id(analysis_id, user_id)

        if not analysis:
            raise EntityNotFoundError("Analysis")

        return analysis
