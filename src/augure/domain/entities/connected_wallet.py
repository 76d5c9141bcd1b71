"""
ConnectedWallet entity - a wallet address a user tracks.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from augure.domain.clock import utc_now
from augure.domain.value_objects.blockchain import Blockchain, validate_wallet_address

MAX_NICKNAME_LENGTH = 50


@dataclass
class ConnectedWallet:
    """
    Wallet connected to a user account.

    Business rules:
    - Address must match the blockchain's address format
    - (user_id, wallet_address) is unique
    - At most one primary wallet per user (enforced by use cases)
    """

    user_id: UUID
    wallet_address: str
    blockchain: Blockchain
    nickname: Optional[str] = None
    is_primary: bool = False
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    last_sync: Optional[datetime] = None

    def __post_init__(self):
        """Validate wallet data after initialization."""
        self.blockchain = Blockchain(self.blockchain)

        if not validate_wallet_address(self.wallet_address, self.blockchain):
            raise ValueError("Invalid wallet address")

        if self.nickname is not None and len(self.nickname) > MAX_NICKNAME_LENGTH:
            raise ValueError(
                f"Nickname must be at most {MAX_NICKNAME_LENGTH} characters"
            )
