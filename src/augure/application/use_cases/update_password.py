"""
Update password use case.
"""

from dataclasses import dataclass
from uuid import UUID

from augure.domain.entities.user import MIN_PASSWORD_LENGTH
from augure.domain.exceptions import (
    AuthenticationError,
    EntityNotFoundError,
    ValidationError,
)
from augure.domain.repositories.i_user_repository import IUserRepository
from augure.domain.services.i_password_hasher import IPasswordHasher


@dataclass
class UpdatePasswordCommand:
    """Command to change a user's password."""

    user_id: UUID
    current_password: str
    new_password: str


class UpdatePassword:
    """Replace a user's password after checking the current one."""

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def execute(self, command: UpdatePasswordCommand) -> None:
        """
        Change password.

        Raises:
            EntityNotFoundError: If user not found
            AuthenticationError: If current password is wrong
            ValidationError: If new password is too short
        """
        user = await self.user_repository.get_by_id(command.user_id)

        if not user:
            raise EntityNotFoundError("User")

        if not await self.password_hasher.verify_async(
            command.current_password, user.password_hash
        ):
            raise AuthenticationError("Current password is incorrect")

        if len(command.new_password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                field="newPassword",
                reason=f"must be at least {MIN_PASSWORD_LENGTH} characters",
            )

        new_hash = await self.password_hasher.hash_async(command.new_password)
        user.change_password_hash(new_hash)
        await self.user_repository.update(user)
