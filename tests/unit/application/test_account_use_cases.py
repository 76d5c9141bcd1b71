"""
Unit tests for account use cases.

Covers registration, login, token validation, password change and
account deletion with mocked repositories.

Usage:
    pytest tests/unit/application/test_account_use_cases.py
"""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from augure.application.use_cases.delete_account import DeleteAccount
from augure.application.use_cases.login_user import LoginUser
from augure.application.use_cases.register_user import (
    RegisterUser,
    RegisterUserCommand,
)
from augure.application.use_cases.update_password import (
    UpdatePassword,
    UpdatePasswordCommand,
)
from augure.application.use_cases.validate_token import ValidateToken
from augure.domain.entities.user import User
from augure.domain.exceptions import (
    AuthenticationError,
    ConflictError,
    DuplicateEntityError,
    EntityNotFoundError,
    ExpiredTokenError,
    InvalidCredentialsError,
    ValidationError,
)
from augure.infrastructure.auth.password_hasher import PBKDF2PasswordHasher
from tests.helpers import make_preferences

PASSWORD = "s3cret-pass"


@pytest.fixture
def hasher() -> PBKDF2PasswordHasher:
    return PBKDF2PasswordHasher(iterations=1000)


@pytest.fixture
def user(hasher) -> User:
    return User(email="alice@example.com", password_hash=hasher.hash(PASSWORD))


class TestRegisterUser:
    """Unit tests for RegisterUser."""

    def _create_use_case(self, hasher, existing=None):
        user_repository = AsyncMock()
        user_repository.get_by_email.return_value = existing
        user_repository.create.side_effect = lambda user: user
        preferences_repository = AsyncMock()
        return RegisterUser(user_repository, preferences_repository, hasher)

    async def test_register(self, hasher):
        use_case = self._create_use_case(hasher)

        user = await use_case.execute(
            RegisterUserCommand(email="Alice@Example.com", password=PASSWORD)
        )

        assert user.email == "alice@example.com"
        assert hasher.verify(PASSWORD, user.password_hash)
        use_case.preferences_repository.create.assert_not_awaited()

    async def test_register_with_preferences(self, hasher):
        use_case = self._create_use_case(hasher)
        scores = make_preferences().scores()

        user = await use_case.execute(
            RegisterUserCommand(email="a@b.io", password=PASSWORD, preferences=scores)
        )

        stored = use_case.preferences_repository.create.await_args.args[0]
        assert stored.user_id == user.id
        assert stored.scores() == scores

    async def test_preference_failure_keeps_account(self, hasher):
        use_case = self._create_use_case(hasher)
        use_case.preferences_repository.create.side_effect = DuplicateEntityError(
            "InvestmentPreferences", "user"
        )

        user = await use_case.execute(
            RegisterUserCommand(
                email="a@b.io",
                password=PASSWORD,
                preferences=make_preferences().scores(),
            )
        )

        assert user.email == "a@b.io"
        use_case.user_repository.create.assert_awaited_once()

    async def test_existing_email(self, hasher, user):
        use_case = self._create_use_case(hasher, existing=user)

        with pytest.raises(ConflictError, match="User already exists"):
            await use_case.execute(
                RegisterUserCommand(email=user.email, password=PASSWORD)
            )

        use_case.user_repository.create.assert_not_awaited()

    async def test_concurrent_duplicate(self, hasher):
        use_case = self._create_use_case(hasher)
        use_case.user_repository.create.side_effect = DuplicateEntityError(
            "User", "email a@b.io"
        )

        with pytest.raises(ConflictError):
            await use_case.execute(RegisterUserCommand(email="a@b.io", password=PASSWORD))

    async def test_short_password(self, hasher):
        use_case = self._create_use_case(hasher)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(RegisterUserCommand(email="a@b.io", password="short"))

        assert exc_info.value.field == "password"
        use_case.user_repository.get_by_email.assert_not_awaited()


class TestLoginUser:
    """Unit tests for LoginUser."""

    async def test_login(self, hasher, user):
        repo = AsyncMock()
        repo.get_by_email.return_value = user

        result = await LoginUser(repo, hasher).execute("ALICE@example.com", PASSWORD)

        assert result is user
        repo.get_by_email.assert_awaited_once_with("ALICE@example.com")

    async def test_wrong_password(self, hasher, user):
        repo = AsyncMock()
        repo.get_by_email.return_value = user

        with pytest.raises(InvalidCredentialsError):
            await LoginUser(repo, hasher).execute(user.email, "wrong-password")

    async def test_unknown_email(self, hasher):
        repo = AsyncMock()
        repo.get_by_email.return_value = None

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await LoginUser(repo, hasher).execute("nobody@example.com", PASSWORD)

        assert exc_info.value.message == "Invalid credentials"


class TestValidateToken:
    """Unit tests for ValidateToken."""

    async def test_valid(self, user):
        repo = AsyncMock()
        repo.get_by_id.return_value = user

        result = await ValidateToken(
            repo, lambda token: {"user_id": str(user.id), "email": user.email}
        ).execute("token")

        assert result.valid is True
        assert result.user is user
        assert result.error is None

    async def test_decoder_error(self):
        def decoder(token):
            raise ExpiredTokenError()

        result = await ValidateToken(AsyncMock(), decoder).execute("token")

        assert result.valid is False
        assert result.error == "Token expired"

    async def test_non_uuid_subject(self):
        result = await ValidateToken(
            AsyncMock(), lambda token: {"user_id": "alice", "email": ""}
        ).execute("token")

        assert result.error == "Invalid token"

    async def test_unknown_user(self):
        repo = AsyncMock()
        repo.get_by_id.return_value = None

        result = await ValidateToken(
            repo, lambda token: {"user_id": str(uuid4()), "email": ""}
        ).execute("token")

        assert result.valid is False
        assert result.error == "User not found"


class TestUpdatePassword:
    """Unit tests for UpdatePassword."""

    async def test_update(self, hasher, user):
        repo = AsyncMock()
        repo.get_by_id.return_value = user

        await UpdatePassword(repo, hasher).execute(
            UpdatePasswordCommand(user.id, PASSWORD, "brand-new-pass")
        )

        assert hasher.verify("brand-new-pass", user.password_hash)
        repo.update.assert_awaited_once_with(user)

    async def test_wrong_current_password(self, hasher, user):
        repo = AsyncMock()
        repo.get_by_id.return_value = user

        with pytest.raises(AuthenticationError, match="Current password is incorrect"):
            await UpdatePassword(repo, hasher).execute(
                UpdatePasswordCommand(user.id, "not-it", "brand-new-pass")
            )

        repo.update.assert_not_awaited()

    async def test_short_new_password(self, hasher, user):
        repo = AsyncMock()
        repo.get_by_id.return_value = user

        with pytest.raises(ValidationError):
            await UpdatePassword(repo, hasher).execute(
                UpdatePasswordCommand(user.id, PASSWORD, "short")
            )

    async def test_unknown_user(self, hasher):
        repo = AsyncMock()
        repo.get_by_id.return_value = None

        with pytest.raises(EntityNotFoundError):
            await UpdatePassword(repo, hasher).execute(
                UpdatePasswordCommand(uuid4(), PASSWORD, "brand-new-pass")
            )


class TestDeleteAccount:
    """Unit tests for DeleteAccount."""

    async def test_delete(self):
        repo = AsyncMock()
        repo.delete.return_value = True
        user_id = uuid4()

        await DeleteAccount(repo).execute(user_id)

        repo.delete.assert_awaited_once_with(user_id)

    async def test_missing_user(self):
        repo = AsyncMock()
        repo.delete.return_value = False

        with pytest.raises(EntityNotFoundError, match="User not found"):
            await DeleteAccount(repo).execute(uuid4())
