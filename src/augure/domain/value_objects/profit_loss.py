"""
ProfitLossResult value object.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProfitLossResult:
    """
    Aggregate profit/loss metrics for one wallet at one price.

    Monetary fields are USD. total_volume is in the chain's native unit.
    """

    total_profit_loss: float = 0.0
    realized_gains: float = 0.0
    unrealized_gains: float = 0.0
    cost_basis: float = 0.0
    total_volume: float = 0.0
    transaction_count: int = 0

    @classmethod
    def zero(cls) -> "ProfitLossResult":
        """Result for a wallet without transactions."""
        return cls()

    def to_dict(self) -> dict:
        """Convert to camelCase dictionary."""
        return {
            "totalProfitLoss": self.total_profit_loss,
            "realizedGains": self.realized_gains,
            "unrealizedGains": self.unrealized_gains,
            "costBasis": self.cost_basis,
            "totalVolume": self.total_volume,
            "transactionCount": self.transaction_count,
        }
