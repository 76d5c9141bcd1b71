"""
Shared test helpers: sample addresses, entity builders and
deterministic stand-ins for outbound integrations.
"""

from typing import Any, Optional
from uuid import uuid4

from augure.domain.entities.investment_preferences import InvestmentPreferences
from augure.domain.exceptions import InsightGenerationError, MarketDataError
from augure.domain.services.i_insight_generator import IInsightGenerator
from augure.domain.services.i_market_data_client import IMarketDataClient
from augure.domain.value_objects.blockchain import Blockchain
from augure.domain.value_objects.market_price import CoinPrice, PricePoint

BTC_ADDRESS = "bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdq"
ETH_ADDRESS = "0x742d35Cc6634C0532925a3b844Bc454e4438f44e"


def make_preferences(user_id=None, **overrides) -> InvestmentPreferences:
    """Preferences with every score at 5 unless overridden."""
    scores = {
        "risk_aversion": 5,
        "volatility_tolerance": 5,
        "growth_focus": 5,
        "crypto_experience": 5,
        "innovation_trust": 5,
        "impact_interest": 5,
        "diversification": 5,
        "holding_patience": 5,
        "monitoring_frequency": 5,
        "advice_openness": 5,
    }
    scores.update(overrides)
    return InvestmentPreferences(user_id=user_id or uuid4(), **scores)


def preference_payload(**overrides) -> dict[str, int]:
    """camelCase preference scores as sent by API clients."""
    payload = {
        "riskAversion": 5,
        "volatilityTolerance": 5,
        "growthFocus": 5,
        "cryptoExperience": 5,
        "innovationTrust": 5,
        "impactInterest": 5,
        "diversification": 5,
        "holdingPatience": 5,
        "monitoringFrequency": 5,
        "adviceOpenness": 5,
    }
    payload.update(overrides)
    return payload


class FakeMarketDataClient(IMarketDataClient):
    """Fixed spot prices; historical series is flat."""

    def __init__(self, prices: Optional[dict[str, float]] = None):
        self.prices = prices or {"bitcoin": 60000.0, "ethereum": 2000.0}

    async def get_current_prices(self) -> dict[str, CoinPrice]:
        return {coin: CoinPrice(usd=usd) for coin, usd in self.prices.items()}

    async def get_coin_price(self, coin: Blockchain) -> float:
        coin = Blockchain(coin)
        if coin.value not in self.prices:
            raise MarketDataError(f"Price not available for {coin.value}")
        return self.prices[coin.value]

    async def get_historical_prices(
        self, coin: Blockchain, days: int = 30
    ) -> list[PricePoint]:
        price = await self.get_coin_price(coin)
        return [
            PricePoint(timestamp=day * 86_400_000, price=price) for day in range(days)
        ]


class FakeInsightGenerator(IInsightGenerator):
    """Records calls; fails on demand."""

    def __init__(self, text: str = "Hold and diversify.", fail: bool = False):
        self.text = text
        self.fail = fail
        self.calls: list[dict[str, Any]] = []

    async def generate_insights(
        self,
        analysis_data: dict[str, Any],
        preferences: InvestmentPreferences,
        blockchain: Blockchain,
    ) -> str:
        self.calls.append(analysis_data)
        if self.fail:
            raise InsightGenerationError("Gemini API error: 503")
        return self.text

    async def generate_quick_summary(
        self, profit_loss: float, blockchain: Blockchain
    ) -> str:
        return "Analysis complete."


async def register(client, email: str = "alice@example.com", **extra) -> dict:
    """Register through the API and return the response body."""
    response = await client.post(
        "/api/auth/register",
        json={"email": email, "password": "s3cret-pass", **extra},
    )
    assert response.status_code == 201, response.text
    return response.json()


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
