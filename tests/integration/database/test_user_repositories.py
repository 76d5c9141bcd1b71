"""
Integration tests for UserRepository and InvestmentPreferencesRepository.

Runs against a throwaway SQLite database.

Usage:
    pytest tests/integration/database/test_user_repositories.py
"""

from uuid import uuid4

import pytest

from augure.domain.entities.connected_wallet import ConnectedWallet
from augure.domain.entities.user import User
from augure.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from augure.domain.value_objects.blockchain import Blockchain
from augure.infrastructure.persistence.repositories import (
    ConnectedWalletRepository,
    InvestmentPreferencesRepository,
    UserRepository,
)
from tests.helpers import ETH_ADDRESS, make_preferences


class TestUserRepository:
    """Integration tests for UserRepository."""

    async def test_create_and_get(self, db_session):
        repo = UserRepository(db_session)
        user = await repo.create(User(email="alice@example.com", password_hash="h"))

        by_id = await repo.get_by_id(user.id)
        by_email = await repo.get_by_email("  ALICE@example.com ")

        assert by_id.email == "alice@example.com"
        assert by_email.id == user.id

    async def test_get_missing(self, db_session):
        repo = UserRepository(db_session)

        assert await repo.get_by_id(uuid4()) is None
        assert await repo.get_by_email("nobody@example.com") is None

    async def test_duplicate_email(self, db_session):
        repo = UserRepository(db_session)
        await repo.create(User(email="a@b.io", password_hash="h"))

        with pytest.raises(DuplicateEntityError):
            await repo.create(User(email="A@B.io", password_hash="h2"))

        # Session is still usable after the failed savepoint
        assert await repo.get_by_email("a@b.io") is not None

    async def test_update(self, db_session):
        repo = UserRepository(db_session)
        user = await repo.create(User(email="a@b.io", password_hash="old"))

        user.change_password_hash("new")
        await repo.update(user)

        assert (await repo.get_by_id(user.id)).password_hash == "new"

    async def test_update_missing(self, db_session):
        with pytest.raises(ValueError):
            await UserRepository(db_session).update(
                User(email="ghost@b.io", password_hash="h")
            )

    async def test_delete_cascades(self, db_session):
        users = UserRepository(db_session)
        preferences = InvestmentPreferencesRepository(db_session)
        wallets = ConnectedWalletRepository(db_session)

        user = await users.create(User(email="a@b.io", password_hash="h"))
        await preferences.create(make_preferences(user.id))
        await wallets.create(
            ConnectedWallet(
                user_id=user.id,
                wallet_address=ETH_ADDRESS,
                blockchain=Blockchain.ETHEREUM,
            )
        )

        assert await users.delete(user.id) is True

        assert await users.get_by_id(user.id) is None
        assert await preferences.get_by_user(user.id) is None
        assert await wallets.list_by_user(user.id) == []
        assert await users.delete(user.id) is False


class TestInvestmentPreferencesRepository:
    """Integration tests for InvestmentPreferencesRepository."""

    async def _user(self, session) -> User:
        return await UserRepository(session).create(
            User(email=f"{uuid4().hex}@example.com", password_hash="h")
        )

    async def test_create_and_get(self, db_session):
        user = await self._user(db_session)
        repo = InvestmentPreferencesRepository(db_session)

        await repo.create(make_preferences(user.id, risk_aversion=8))
        stored = await repo.get_by_user(user.id)

        assert stored.risk_aversion == 8
        assert stored.advice_openness == 5

    async def test_one_row_per_user(self, db_session):
        user = await self._user(db_session)
        repo = InvestmentPreferencesRepository(db_session)
        await repo.create(make_preferences(user.id))

        with pytest.raises(DuplicateEntityError):
            await repo.create(make_preferences(user.id))

    async def test_update(self, db_session):
        user = await self._user(db_session)
        repo = InvestmentPreferencesRepository(db_session)
        prefs = await repo.create(make_preferences(user.id))

        prefs.apply_updates({"growth_focus": 9})
        await repo.update(prefs)

        assert (await repo.get_by_user(user.id)).growth_focus == 9

    async def test_update_missing(self, db_session):
        with pytest.raises(EntityNotFoundError):
            await InvestmentPreferencesRepository(db_session).update(
                make_preferences()
            )
