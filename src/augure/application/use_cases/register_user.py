"""
Register user use case.

Creates an email/password account, optionally seeding investment
preferences in the same request.
"""

from dataclasses import dataclass
from typing import Optional

from augure.domain.entities.investment_preferences import InvestmentPreferences
from augure.domain.entities.user import MIN_PASSWORD_LENGTH, User
from augure.domain.exceptions import (
    AugureException,
    ConflictError,
    DuplicateEntityError,
    ValidationError,
)
from augure.domain.repositories.i_investment_preferences_repository import (
    IInvestmentPreferencesRepository,
)
from augure.domain.repositories.i_user_repository import IUserRepository
from augure.domain.services.i_password_hasher import IPasswordHasher
from augure.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


@dataclass
class RegisterUserCommand:
    """Command to register a new account."""

    email: str
    password: str
    preferences: Optional[dict[str, int]] = None


class RegisterUser:
    """
    Use case for account registration.

    Business rules:
    - Email must not be registered yet
    - Password must be at least MIN_PASSWORD_LENGTH characters
    - Preferences are optional; failing to store them does not undo
      the registration
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        preferences_repository: IInvestmentPreferencesRepository,
        password_hasher: IPasswordHasher,
    ):
        """
        Initialize use case with dependencies.

        Args:
            user_repository: Repository for user persistence
            preferences_repository: Repository for investment preferences
            password_hasher: Password hashing service
        """
        self.user_repository = user_repository
        self.preferences_repository = preferences_repository
        self.password_hasher = password_hasher

    async def execute(self, command: RegisterUserCommand) -> User:
        """
        Register a new user.

        Args:
            command: Registration data

        Returns:
            Created user entity

        Raises:
            ConflictError: If the email is already registered
            ValidationError: If email or password is invalid
        """
        if len(command.password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                field="password",
                reason=f"must be at least {MIN_PASSWORD_LENGTH} characters",
            )

        # 1. Email must be unused
        existing = await self.user_repository.get_by_email(command.email)
        if existing:
            raise ConflictError("User already exists")

        # 2. Create user
        password_hash = await self.password_hasher.hash_async(command.password)
        try:
            user = User(email=command.email, password_hash=password_hash)
        except ValueError as e:
            raise ValidationError(field="email", reason=str(e))

        try:
            user = await self.user_repository.create(user)
        except DuplicateEntityError:
            raise ConflictError("User already exists")

        logger.info("User registered", extra={"user_id": str(user.id)})

        # 3. Optional preferences
        if command.preferences:
            await self._store_preferences(user, command.preferences)

        return user

    async def _store_preferences(self, user: User, scores: dict[str, int]) -> None:
        try:
            preferences = InvestmentPreferences(user_id=user.id, **scores)
            await self.preferences_repository.create(preferences)
        except (AugureException, ValueError, TypeError) as e:
            logger.error(
                "Failed to store preferences at registration",
                extra={"user_id": str(user.id), "error": str(e)},
            )
