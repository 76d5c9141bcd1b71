"""
Generate full analysis use case.

Orchestrates the analysis pipeline for one wallet:
transactions -> spot price -> profit/loss -> (insights) -> persistence.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Optional
from uuid import UUID

from augure.domain.clock import utc_now
from augure.domain.entities.investment_preferences import InvestmentPreferences
from augure.domain.entities.wallet_analysis import WalletAnalysis
from augure.domain.repositories.i_investment_preferences_repository import (
    IInvestmentPreferencesRepository,
)
from augure.domain.repositories.i_wallet_analysis_repository import (
    IWalletAnalysisRepository,
)
from augure.domain.services.i_insight_generator import IInsightGenerator
from augure.domain.services.i_market_data_client import IMarketDataClient
from augure.domain.services.i_transaction_source import ITransactionSource
from augure.domain.services.profit_loss_calculator import calculate_profit_loss
from augure.domain.value_objects.analysis_data import AnalysisData
from augure.domain.value_objects.blockchain import Blockchain
from augure.domain.value_objects.profit_loss import ProfitLossResult
from augure.infrastructure.monitoring.logger import get_logger
from augure.infrastructure.monitoring.metrics import (
    analyses_generated_total,
    insight_failures_total,
)

logger = get_logger(__name__)


def build_insight_payload(
    profit_loss: ProfitLossResult, current_price: float, blockchain: Blockchain
) -> dict[str, Any]:
    """
    Metrics handed to the insight generator.

    balance is an estimate of the held amount derived from the
    aggregate figures; 0 when the price is 0.
    """
    if current_price:
        balance = profit_loss.total_volume - profit_loss.total_profit_loss / current_price
    else:
        balance = 0.0
    if not math.isfinite(balance):
        balance = 0.0

    return {
        **profit_loss.to_dict(),
        "blockchain": blockchain.value,
        "currentPrice": current_price,
        "balance": balance,
    }


@dataclass
class GenerateFullAnalysisCommand:
    """Command to analyse one wallet."""

    user_id: UUID
    wallet_address: str
    blockchain: Blockchain


class GenerateFullAnalysis:
    """
    Use case for generating and storing a wallet analysis.

    Business rules:
    - An invalid address fails before any network call and nothing is
      stored
    - Insights are generated only when the user has preferences
    - Insight failures never fail the analysis; ai_insights is None
    - One stored analysis per (user, wallet), overwritten on re-run
    """

    def __init__(
        self,
        transaction_source: ITransactionSource,
        market_data_client: IMarketDataClient,
        insight_generator: IInsightGenerator,
        preferences_repository: IInvestmentPreferencesRepository,
        analysis_repository: IWalletAnalysisRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize use case with dependencies.

        Args:
            transaction_source: Wallet transaction history provider
            market_data_client: Spot price provider
            insight_generator: Natural-language insight service
            preferences_repository: Investment preferences repository
            analysis_repository: Wallet analysis repository
            clock: Returns the analysis timestamp (UTC)
        """
        self.transaction_source = transaction_source
        self.market_data_client = market_data_client
        self.insight_generator = insight_generator
        self.preferences_repository = preferences_repository
        self.analysis_repository = analysis_repository
        self.clock = clock

    async def execute(self, command: GenerateFullAnalysisCommand) -> WalletAnalysis:
        """
        Run the analysis pipeline.

        Args:
            command: User, wallet and chain to analyse

        Returns:
            Stored wallet analysis

        Raises:
            ValidationError: If the wallet address is invalid
            MarketDataError: If the price lookup fails after retries
        """
        blockchain = command.blockchain

        # 1. Transactions (validates the address)
        transactions = await self.transaction_source.fetch_transactions(
            command.wallet_address, blockchain
        )

        # 2. Spot price
        current_price = await self.market_data_client.get_coin_price(blockchain)

        # 3. Profit/loss
        profit_loss = calculate_profit_loss(
            command.wallet_address, transactions, current_price
        )

        # 4-5. Insights when preferences exist
        preferences = await self.preferences_repository.get_by_user(command.user_id)
        ai_insights = None
        if preferences:
            ai_insights = await self._generate_insights(
                profit_loss, current_price, blockchain, preferences
            )

        # 6. Persist
        analysis_data = AnalysisData(
            profit_loss=profit_loss,
            current_price=current_price,
            blockchain=blockchain,
            analyzed_at=self.clock(),
        )
        analysis = await self.analysis_repository.upsert(
            WalletAnalysis(
                user_id=command.user_id,
                wallet_address=command.wallet_address,
                blockchain=blockchain,
                analysis_data=analysis_data,
                ai_insights=ai_insights,
            )
        )

        analyses_generated_total.labels(
            blockchain=blockchain.value,
            with_insights=str(ai_insights is not None).lower(),
        ).inc()
        logger.info(
            "Wallet analysis generated",
            extra={
                "analysis_id": str(analysis.id),
                "blockchain": blockchain.value,
                "transaction_count": profit_loss.transaction_count,
            },
        )

        return analysis

    async def _generate_insights(
        self,
        profit_loss: ProfitLossResult,
        current_price: float,
        blockchain: Blockchain,
        preferences: InvestmentPreferences,
    ) -> Optional[str]:
        payload = build_insight_payload(profit_loss, current_price, blockchain)
        try:
            return await self.insight_generator.generate_insights(
                payload, preferences, blockchain
            )
        except Exception as e:
            insight_failures_total.labels(blockchain=blockchain.value).inc()
            logger.warning(
                "Insight generation failed, storing analysis without insights",
                extra={"blockchain": blockchain.value, "error": str(e)},
            )
            return None
