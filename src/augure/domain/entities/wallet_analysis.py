"""
WalletAnalysis entity - persisted result of analysing one wallet.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from augure.domain.clock import utc_now
from augure.domain.value_objects.analysis_data import AnalysisData
from augure.domain.value_objects.blockchain import Blockchain


@dataclass
class WalletAnalysis:
    """
    Latest analysis for a (user, wallet) pair.

    Re-analysing the same wallet overwrites analysis_data and
    ai_insights in place; the id and created_at are kept.
    """

    user_id: UUID
    wallet_address: str
    blockchain: Blockchain
    analysis_data: AnalysisData
    ai_insights: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        """Validate analysis data after initialization."""
        self.blockchain = Blockchain(self.blockchain)

        if not self.wallet_address:
            raise ValueError("Wallet address is required")

