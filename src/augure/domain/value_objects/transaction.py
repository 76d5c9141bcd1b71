"""
Transaction value object - a single on-chain transfer.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Transaction:
    """
    On-chain transfer as reported by a transaction source.

    Value is kept as a decimal string in the chain's native unit
    (BTC or ETH) exactly as the source reported it. Parsing happens
    in the profit/loss calculator.
    """

    hash: str
    block_number: int
    timestamp: str
    from_address: str
    to_address: str
    value: str
    fee: Optional[str] = None
    gas_used: Optional[str] = None

