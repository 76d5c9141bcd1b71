"""
User repository implementation.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from augure.domain.entities.user import User
from augure.domain.exceptions import DuplicateEntityError
from augure.domain.repositories.i_user_repository import IUserRepository
from augure.infrastructure.persistence.models import UserModel


class UserRepository(IUserRepository):
    """
    SQLAlchemy implementation of user repository.

    Deleting a user relies on ON DELETE CASCADE foreign keys to remove
    preferences, wallets and analyses.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, user: User) -> User:
        """
        Create new user in database.

        Args:
            user: User entity to create

        Returns:
            Created user entity

        Raises:
            DuplicateEntityError: If email already registered
        """
        model = UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

        try:
            async with self.session.begin_nested():
                self.session.add(model)
                await self.session.flush()
        except IntegrityError:
            raise DuplicateEntityError("User", f"email {user.email}")

        await self.session.refresh(model)
        return self._to_entity(model)

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User unique identifier

        Returns:
            User entity if found, None otherwise
        """
        model = await self._get_model(user_id)
        return self._to_entity(model) if model else None

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email.

        Args:
            email: Account email (any case)

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserModel).where(UserModel.email == email.strip().lower())
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def update(self, user: User) -> User:
        """
        Update existing user.

        Args:
            user: User entity with updated data

        Returns:
            Updated user entity
        """
        model = await self._get_model(user.id)

        if not model:
            raise ValueError(f"User {user.id} not found")

        model.email = user.email
        model.password_hash = user.password_hash
        model.updated_at = user.updated_at

        await self.session.flush()
        await self.session.refresh(model)

        return self._to_entity(model)

    async def delete(self, user_id: UUID) -> bool:
        """
        Delete user by ID.

        Args:
            user_id: User unique identifier

        Returns:
            True if deleted, False if not found
        """
        result = await self.session.execute(
            delete(UserModel).where(UserModel.id == user_id)
        )
        await self.session.flush()
        return result.rowcount > 0

    async def _get_model(self, user_id: UUID) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: UserModel) -> User:
        """
        Convert UserModel to User entity.

        Args:
            model: SQLAlchemy model

        Returns:
            User domain entity
        """
        return User(
            id=model.id,
            email=model.email,
            password_hash=model.password_hash,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
