"""
Illustrative transaction source.

Returns a fixed, small transaction list per chain so the analysis
pipeline can run end to end without a blockchain indexer. Replace with
an indexer-backed ITransactionSource for real data.
"""

from datetime import datetime
from typing import Callable

from augure.domain.clock import utc_now
from augure.domain.exceptions import ValidationError
from augure.domain.services.i_cache import ICache
from augure.domain.services.i_transaction_source import ITransactionSource
from augure.domain.value_objects.blockchain import Blockchain, validate_wallet_address
from augure.domain.value_objects.transaction import Transaction
from augure.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class SampleTransactionSource(ITransactionSource):
    """
    Placeholder transaction source with cached, deterministic output.

    Address format is validated before anything else; a malformed
    address is never cached and never retried.
    """

    def __init__(self, cache: ICache, clock: Callable[[], datetime] = utc_now):
        """
        Initialize source.

        Args:
            cache: Response cache
            clock: Source of the timestamp stamped on sample transactions
        """
        self.cache = cache
        self._clock = clock

    @staticmethod
    def cache_key(
        address: str, blockchain: Blockchain, include_token_transfers: bool
    ) -> str:
        """Cache key for an address query."""
        if blockchain is Blockchain.BITCOIN:
            return f"btc:txs:{address}"
        return f"eth:txs:{address}:{str(include_token_transfers).lower()}"

    async def fetch_transactions(
        self,
        address: str,
        blockchain: Blockchain,
        include_token_transfers: bool = False,
    ) -> list[Transaction]:
        """
        Fetch sample transactions for an address.

        Raises:
            ValidationError: If the address format is invalid
        """
        blockchain = Blockchain(blockchain)

        if not validate_wallet_address(address, blockchain):
            raise ValidationError(
                None, f"Invalid {blockchain.display_name} address"
            )

        key = self.cache_key(address, blockchain, include_token_transfers)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        if blockchain is Blockchain.BITCOIN:
            transactions = self._bitcoin_transactions(address)
        else:
            transactions = self._ethereum_transactions(address)

        logger.debug(
            f"Loaded {len(transactions)} sample {blockchain.value} transactions"
        )
        self.cache.set(key, transactions)
        return transactions

    def _bitcoin_transactions(self, address: str) -> list[Transaction]:
        return [
            Transaction(
                hash="0x" + "a" * 64,
                block_number=800000,
                timestamp=self._clock().isoformat(),
                from_address=address,
                to_address="bc1q" + "b" * 38,
                value="0.1",
                fee="0.0001",
            )
        ]

    def _ethereum_transactions(self, address: str) -> list[Transaction]:
        timestamp = self._clock().isoformat()
        return [
            Transaction(
                hash="0x" + "c" * 64,
                block_number=19000000,
                timestamp=timestamp,
                from_address=address,
                to_address="0x" + "d" * 40,
                value="0.5",
                gas_used="21000",
            ),
            Transaction(
                hash="0x" + "e" * 64,
                block_number=19000002,
                timestamp=timestamp,
                from_address="0x" + "f" * 40,
                to_address=address,
                value="5.0",
                gas_used="21000",
            ),
        ]
