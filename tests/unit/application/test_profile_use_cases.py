"""
Unit tests for profile, preference and wallet use cases.

Usage:
    pytest tests/unit/application/test_profile_use_cases.py
"""

from datetime import datetime
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from augure.application.use_cases.connect_wallet import (
    ConnectWallet,
    ConnectWalletCommand,
)
from augure.application.use_cases.disconnect_wallet import DisconnectWallet
from augure.application.use_cases.get_user_profile import GetUserProfile
from augure.application.use_cases.list_wallets import ListWallets
from augure.application.use_cases.set_primary_wallet import SetPrimaryWallet
from augure.application.use_cases.update_preferences import (
    UpdatePreferences,
    UpdatePreferencesCommand,
)
from augure.domain.entities.connected_wallet import ConnectedWallet
from augure.domain.entities.user import User
from augure.domain.exceptions import (
    ConflictError,
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)
from augure.domain.value_objects.blockchain import Blockchain
from tests.helpers import BTC_ADDRESS, ETH_ADDRESS, make_preferences


def _wallet(user_id, address=ETH_ADDRESS, blockchain=Blockchain.ETHEREUM, **kwargs):
    return ConnectedWallet(
        user_id=user_id, wallet_address=address, blockchain=blockchain, **kwargs
    )


class TestUpdatePreferences:
    """Unit tests for UpdatePreferences."""

    def _create_use_case(self, existing=None) -> UpdatePreferences:
        repo = AsyncMock()
        repo.get_by_user.return_value = existing
        repo.create.side_effect = lambda prefs: prefs
        repo.update.side_effect = lambda prefs: prefs
        return UpdatePreferences(repo)

    async def test_create_requires_all_fields(self):
        use_case = self._create_use_case()

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                UpdatePreferencesCommand(uuid4(), {"growth_focus": 4})
            )

        assert exc_info.value.message == "Missing required field: riskAversion"
        use_case.preferences_repository.create.assert_not_awaited()

    async def test_create(self):
        use_case = self._create_use_case()
        user_id = uuid4()
        scores = make_preferences().scores()

        prefs = await use_case.execute(UpdatePreferencesCommand(user_id, scores))

        assert prefs.user_id == user_id
        assert prefs.scores() == scores
        use_case.preferences_repository.create.assert_awaited_once()

    async def test_partial_update(self):
        existing = make_preferences()
        use_case = self._create_use_case(existing)

        prefs = await use_case.execute(
            UpdatePreferencesCommand(
                existing.user_id, {"risk_aversion": 2, "growth_focus": None}
            )
        )

        assert prefs.risk_aversion == 2
        assert prefs.growth_focus == 5
        use_case.preferences_repository.update.assert_awaited_once_with(existing)

    async def test_out_of_range(self):
        existing = make_preferences()
        use_case = self._create_use_case(existing)

        with pytest.raises(ValidationError):
            await use_case.execute(
                UpdatePreferencesCommand(existing.user_id, {"risk_aversion": 11})
            )

        use_case.preferences_repository.update.assert_not_awaited()


class TestConnectWallet:
    """Unit tests for ConnectWallet."""

    def _create_use_case(self, existing=None, count=0) -> ConnectWallet:
        repo = AsyncMock()
        repo.get_by_address.return_value = existing
        repo.count_by_user.return_value = count
        repo.create.side_effect = lambda wallet: wallet
        return ConnectWallet(repo)

    async def test_first_wallet_is_primary(self):
        use_case = self._create_use_case(count=0)

        wallet = await use_case.execute(
            ConnectWalletCommand(uuid4(), BTC_ADDRESS, Blockchain.BITCOIN, "cold")
        )

        assert wallet.is_primary is True
        assert wallet.nickname == "cold"

    async def test_second_wallet_is_not_primary(self):
        use_case = self._create_use_case(count=1)

        wallet = await use_case.execute(
            ConnectWalletCommand(uuid4(), ETH_ADDRESS, Blockchain.ETHEREUM)
        )

        assert wallet.is_primary is False

    async def test_invalid_address(self):
        use_case = self._create_use_case()

        with pytest.raises(ValidationError, match="Invalid wallet address"):
            await use_case.execute(
                ConnectWalletCommand(uuid4(), BTC_ADDRESS, Blockchain.ETHEREUM)
            )

        use_case.wallet_repository.create.assert_not_awaited()

    async def test_already_connected(self):
        user_id = uuid4()
        use_case = self._create_use_case(existing=_wallet(user_id))

        with pytest.raises(ConflictError, match="Wallet already connected"):
            await use_case.execute(
                ConnectWalletCommand(user_id, ETH_ADDRESS, Blockchain.ETHEREUM)
            )

    async def test_concurrent_duplicate(self):
        use_case = self._create_use_case()
        use_case.wallet_repository.create.side_effect = DuplicateEntityError(
            "ConnectedWallet", "address"
        )

        with pytest.raises(ConflictError):
            await use_case.execute(
                ConnectWalletCommand(uuid4(), ETH_ADDRESS, Blockchain.ETHEREUM)
            )


class TestDisconnectWallet:
    """Unit tests for DisconnectWallet."""

    async def test_primary_is_reassigned(self):
        user_id = uuid4()
        primary = _wallet(user_id, is_primary=True)
        other = _wallet(user_id, BTC_ADDRESS, Blockchain.BITCOIN)
        repo = AsyncMock()
        repo.get_by_id.return_value = primary
        repo.list_by_user.return_value = [other]

        await DisconnectWallet(repo).execute(user_id, primary.id)

        repo.delete.assert_awaited_once_with(primary.id, user_id)
        repo.set_primary.assert_awaited_once_with(other.id, user_id)

    async def test_non_primary(self):
        user_id = uuid4()
        wallet = _wallet(user_id)
        repo = AsyncMock()
        repo.get_by_id.return_value = wallet

        await DisconnectWallet(repo).execute(user_id, wallet.id)

        repo.set_primary.assert_not_awaited()

    async def test_not_found(self):
        repo = AsyncMock()
        repo.get_by_id.return_value = None

        with pytest.raises(EntityNotFoundError, match="Wallet not found"):
            await DisconnectWallet(repo).execute(uuid4(), uuid4())

        repo.delete.assert_not_awaited()


class TestSetPrimaryWallet:
    """Unit tests for SetPrimaryWallet."""

    async def test_not_owned(self):
        repo = AsyncMock()
        repo.get_by_id.return_value = None

        with pytest.raises(EntityNotFoundError):
            await SetPrimaryWallet(repo).execute(uuid4(), uuid4())

        repo.set_primary.assert_not_awaited()


class TestListWalletsAndProfile:
    """Unit tests for ListWallets and GetUserProfile."""

    def _list_wallets(self, wallets, analyzed) -> ListWallets:
        wallet_repository = AsyncMock()
        wallet_repository.list_by_user.return_value = wallets
        analysis_repository = AsyncMock()
        analysis_repository.last_analyzed_at.return_value = analyzed
        return ListWallets(wallet_repository, analysis_repository)

    async def test_last_sync_from_analyses(self):
        user_id = uuid4()
        eth = _wallet(user_id)
        btc = _wallet(user_id, BTC_ADDRESS, Blockchain.BITCOIN)
        synced_at = datetime(2026, 10, 1, 12, 0)

        wallets = await self._list_wallets(
            [eth, btc], {(ETH_ADDRESS, "ethereum"): synced_at}
        ).execute(user_id)

        assert wallets[0].last_sync == synced_at
        assert wallets[1].last_sync is None

    async def test_no_wallets_skips_analysis_lookup(self):
        list_wallets = self._list_wallets([], {})

        assert await list_wallets.execute(uuid4()) == []
        list_wallets.analysis_repository.last_analyzed_at.assert_not_awaited()

    async def test_profile(self):
        user = User(email="a@b.io", password_hash="hash")
        prefs = make_preferences(user.id)
        wallet = _wallet(user.id)
        preferences_repository = AsyncMock()
        preferences_repository.get_by_user.return_value = prefs

        profile = await GetUserProfile(
            preferences_repository, self._list_wallets([wallet], {})
        ).execute(user)

        assert profile.user is user
        assert profile.preferences is prefs
        assert profile.wallets == [wallet]
