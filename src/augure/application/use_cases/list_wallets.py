"""
List wallets use case.
"""

from uuid import UUID

from augure.domain.entities.connected_wallet import ConnectedWallet
from augure.domain.repositories.i_connected_wallet_repository import (
    IConnectedWalletRepository,
)
from augure.domain.repositories.i_wallet_analysis_repository import (
    IWalletAnalysisRepository,
)


class ListWallets:
    """
    List a user's wallets, newest first.

    Each wallet's last_sync is the time of the latest analysis of the
    same address on the same chain, or None if it was never analysed.
    """

    def __init__(
        self,
        wallet_repository: IConnectedWalletRepository,
        analysis_repository: IWalletAnalysisRepository,
    ):
        self.wallet_repository = wallet_repository
        self.analysis_repository = analysis_repository

    async def execute(self, user_id: UUID) -> list[ConnectedWallet]:
        wallets = await self.wallet_repository.list_by_user(user_id)
        if not wallets:
            return wallets

        analyzed = await self.analysis_repository.last_analyzed_at(user_id)
        for wallet in wallets:
            wallet.last_sync = analyzed.get(
                (wallet.wallet_address, wallet.blockchain.value)
            )

        return wallets
