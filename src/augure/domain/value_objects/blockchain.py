"""
Blockchain value object and wallet address format rules.
"""

import re
from enum import Enum


class Blockchain(str, Enum):
    """Supported blockchains."""

    BITCOIN = "bitcoin"
    ETHEREUM = "ethereum"

    @property
    def display_name(self) -> str:
        """Human readable name used in error messages."""
        return "Bitcoin" if self is Blockchain.BITCOIN else "Ethereum"

    @property
    def ticker(self) -> str:
        """Three letter unit used in summaries (BIT, ETH)."""
        return self.value.upper()[:3]


# Legacy (1...), P2SH (3...) and bech32 (bc1...) addresses
_BITCOIN_ADDRESS = re.compile(r"^(bc1|[13])[a-zA-HJ-NP-Z0-9]{25,62}$")
_ETHEREUM_ADDRESS = re.compile(r"^0x[a-fA-F0-9]{40}$")


def validate_wallet_address(address: str, blockchain: Blockchain | str) -> bool:
    """
    Check wallet address format for a blockchain.

    Pure format check, no checksum verification and no network access.

    Args:
        address: Wallet address to check
        blockchain: Target blockchain

    Returns:
        True if address matches the blockchain's address format
    """
    chain = Blockchain(blockchain)
    pattern = _BITCOIN_ADDRESS if chain is Blockchain.BITCOIN else _ETHEREUM_ADDRESS
    return pattern.fullmatch(address or "") is not None
