"""
Login user use case.
"""

from augure.domain.entities.user import User
from augure.domain.exceptions import InvalidCredentialsError
from augure.domain.repositories.i_user_repository import IUserRepository
from augure.domain.services.i_password_hasher import IPasswordHasher


class LoginUser:
    """
    Authenticate a user with email and password.

    Unknown email and wrong password fail the same way so callers
    cannot probe which accounts exist.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def execute(self, email: str, password: str) -> User:
        """
        Verify credentials.

        Args:
            email: Account email (any case)
            password: Clear-text password

        Returns:
            Authenticated user entity

        Raises:
            InvalidCredentialsError: If email or password is wrong
        """
        user = await self.user_repository.get_by_email(email)

        if not user or not await self.password_hasher.verify_async(
            password, user.password_hash
        ):
            raise InvalidCredentialsError()

        return user
