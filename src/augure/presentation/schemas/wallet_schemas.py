"""
Connected wallet API schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from augure.domain.entities.connected_wallet import ConnectedWallet
from augure.domain.value_objects.blockchain import Blockchain
from augure.presentation.schemas.base import CamelModel


class ConnectWalletRequest(CamelModel):
    """Request to connect a wallet address."""

    wallet_address: str = Field(..., min_length=1, max_length=100)
    blockchain: Blockchain
    nickname: Optional[str] = Field(default=None, max_length=50)


class WalletResponse(CamelModel):
    """Connected wallet."""

    id: str
    wallet_address: str
    blockchain: Blockchain
    nickname: Optional[str] = None
    is_primary: bool
    created_at: datetime
    last_sync: Optional[datetime] = None

    @classmethod
    def from_entity(cls, wallet: ConnectedWallet) -> "WalletResponse":
        return cls(
            id=str(wallet.id),
            wallet_address=wallet.wallet_address,
            blockchain=wallet.blockchain,
            nickname=wallet.nickname,
            is_primary=wallet.is_primary,
            created_at=wallet.created_at,
            last_sync=wallet.last_sync,
        )


class WalletEnvelope(CamelModel):
    wallet: WalletResponse


class WalletListResponse(CamelModel):
    wallets: List[WalletResponse]
