"""
Get analysis history use case.
"""

import math
from dataclasses import dataclass, field
from typing import Optional
from uuid import UUID

from augure.domain.entities.wallet_analysis import WalletAnalysis
from augure.domain.exceptions import ValidationError
from augure.domain.repositories.i_wallet_analysis_repository import (
    IWalletAnalysisRepository,
)
from augure.domain.value_objects.blockchain import Blockchain

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50


@dataclass
class GetAnalysisHistoryQuery:
    """Page of a user's analyses, optionally filtered by chain."""

    user_id: UUID
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE
    blockchain: Optional[Blockchain] = None


@dataclass
class AnalysisHistoryPage:
    """One page of analyses plus pagination counters."""

    analyses: list[WalletAnalysis] = field(default_factory=list)
    current_page: int = 1
    total_pages: int = 0
    total_items: int = 0
    items_per_page: int = DEFAULT_PAGE_SIZE

    def pagination(self) -> dict:
        """Pagination block as rendered by the API."""
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "totalItems": self.total_items,
            "itemsPerPage": self.items_per_page,
        }


class GetAnalysisHistory:
    """List a user's analyses, newest first."""

    def __init__(self, analysis_repository: IWalletAnalysisRepository):
        self.analysis_repository = analysis_repository

    async def execute(self, query: GetAnalysisHistoryQuery) -> AnalysisHistoryPage:
        """
        Load one page.

        Raises:
            ValidationError: If page < 1 or limit outside [1, MAX_PAGE_SIZE]
        """
        if query.page < 1:
            raise ValidationError(field="page", reason="must be at least 1")
        if not 1 <= query.limit <= MAX_PAGE_SIZE:
            raise ValidationError(
                field="limit", reason=f"must be between 1 and {MAX_PAGE_SIZE}"
            )

        analyses, total = await self.analysis_repository.list_by_user(
            query.user_id,
            offset=(query.page - 1) * query.limit,
            limit=query.limit,
            blockchain=query.blockchain,
        )

        return AnalysisHistoryPage(
            analyses=analyses,
            current_page=query.page,
            total_pages=math.ceil(total / query.limit),
            total_items=total,
            items_per_page=query.limit,
        )
