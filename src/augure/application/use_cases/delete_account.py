"""
Delete account use case.
"""

from uuid import UUID

from augure.domain.exceptions import EntityNotFoundError
from augure.domain.repositories.i_user_repository import IUserRepository
from augure.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


class DeleteAccount:
    """
    Delete a user account.

    Preferences, wallets and analyses go with it through cascading
    foreign keys.
    """

    def __init__(self, user_repository: IUserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: UUID) -> None:
        """
        Raises:
            EntityNotFoundError: If user not found
        """
        deleted = await self.user_repository.delete(user_id)

        if not deleted:
            raise EntityNotFoundError("User")

        logger.info("Account deleted", extra={"user_id": str(user_id)})
