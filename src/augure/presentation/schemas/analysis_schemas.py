"""
Wallet analysis API schemas.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Field

from augure.domain.entities.wallet_analysis import WalletAnalysis
from augure.domain.value_objects.blockchain import Blockchain
from augure.presentation.schemas.base import CamelModel


class GenerateAnalysisRequest(CamelModel):
    """Request to analyse a wallet."""

    wallet_address: str = Field(..., min_length=1, max_length=100)
    blockchain: Blockchain


class AnalysisResponse(CamelModel):
    """
    Stored analysis.

    analysis_data is the versioned camelCase payload (schemaVersion,
    P&L figures, currentPrice, blockchain, analyzedAt).
    """

    id: str
    wallet_address: str
    blockchain: Blockchain
    analysis_data: Dict[str, Any]
    ai_insights: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, analysis: WalletAnalysis) -> "AnalysisResponse":
        return cls(
            id=str(analysis.id),
            wallet_address=analysis.wallet_address,
            blockchain=analysis.blockchain,
            analysis_data=analysis.analysis_data.to_dict(),
            ai_insights=analysis.ai_insights,
            created_at=analysis.created_at,
            updated_at=analysis.updated_at,
        )


class AnalysisEnvelope(CamelModel):
    analysis: AnalysisResponse


class PaginationResponse(CamelModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int


class AnalysisHistoryResponse(CamelModel):
    analyses: List[AnalysisResponse]
    pagination: PaginationResponse
