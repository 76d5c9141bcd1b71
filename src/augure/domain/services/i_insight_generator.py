"""
Insight generator interface.
"""

from abc import ABC, abstractmethod
from typing import Any

from augure.domain.entities.investment_preferences import InvestmentPreferences
from augure.domain.value_objects.blockchain import Blockchain


class IInsightGenerator(ABC):
    """Produces natural-language commentary on wallet analyses."""

    @abstractmethod
    async def generate_insights(
        self,
        analysis_data: dict[str, Any],
        preferences: InvestmentPreferences,
        blockchain: Blockchain,
    ) -> str:
        """
        Generate personalised recommendations.

        Args:
            analysis_data: Metrics to comment on
            preferences: Investor profile scores
            blockchain: Chain the wallet lives on

        Returns:
            Generated text, never blank

        Raises:
            InsightGenerationError: If generation fails after retries
        """

    @abstractmethod
    async def generate_quick_summary(
        self, profit_loss: float, blockchain: Blockchain
    ) -> str:
        """Generate a one-sentence neutral summary of net profit or loss."""

    async def close(self) -> None:
        """Release network resources."""
