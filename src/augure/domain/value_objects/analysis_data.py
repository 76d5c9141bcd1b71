"""
AnalysisData value object - versioned payload stored with each analysis.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from augure.domain.value_objects.blockchain import Blockchain
from augure.domain.value_objects.profit_loss import ProfitLossResult

ANALYSIS_DATA_SCHEMA_VERSION = 1


@dataclass(frozen=True)
class AnalysisData:
    """
    Persisted analysis payload.

    Serialized as camelCase JSON with an explicit schemaVersion so
    readers never have to guess the shape of stored rows.
    """

    profit_loss: ProfitLossResult
    current_price: float
    blockchain: Blockchain
    analyzed_at: datetime
    schema_version: int = ANALYSIS_DATA_SCHEMA_VERSION

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the stored JSON shape."""
        return {
            "schemaVersion": self.schema_version,
            **self.profit_loss.to_dict(),
            "currentPrice": self.current_price,
            "blockchain": self.blockchain.value,
            "analyzedAt": self.analyzed_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AnalysisData":
        """
        Parse stored JSON back into a typed payload.

        Raises:
            ValueError: If the schema version is unknown
        """
        version = int(data.get("schemaVersion", ANALYSIS_DATA_SCHEMA_VERSION))
        if version != ANALYSIS_DATA_SCHEMA_VERSION:
            raise ValueError(f"Unsupported analysis data schema version: {version}")

        profit_loss = ProfitLossResult(
            total_profit_loss=float(data.get("totalProfitLoss", 0.0)),
            realized_gains=float(data.get("realizedGains", 0.0)),
            unrealized_gains=float(data.get("unrealizedGains", 0.0)),
            cost_basis=float(data.get("costBasis", 0.0)),
            total_volume=float(data.get("totalVolume", 0.0)),
            transaction_count=int(data.get("transactionCount", 0)),
        )
        return cls(
            profit_loss=profit_loss,
            current_price=float(data.get("currentPrice", 0.0)),
            blockchain=Blockchain(data["blockchain"]),
            analyzed_at=datetime.fromisoformat(data["analyzedAt"]),
            schema_version=version,
        )
