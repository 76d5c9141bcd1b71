"""
Transaction source interface.
"""

from abc import ABC, abstractmethod

from augure.domain.value_objects.blockchain import Blockchain
from augure.domain.value_objects.transaction import Transaction


class ITransactionSource(ABC):
    """Provides the transaction history of a wallet address."""

    @abstractmethod
    async def fetch_transactions(
        self,
        address: str,
        blockchain: Blockchain,
        include_token_transfers: bool = False,
    ) -> list[Transaction]:
        """
        Fetch transactions touching an address.

        Args:
            address: Wallet address
            blockchain: Chain the address lives on
            include_token_transfers: Include token transfers (ethereum only)

        Returns:
            List of transactions

        Raises:
            ValidationError: If the address format is invalid
        """
