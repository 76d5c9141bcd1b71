"""
Validate token use case.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional
from uuid import UUID

from augure.domain.entities.user import User
from augure.domain.exceptions import AuthenticationError
from augure.domain.repositories.i_user_repository import IUserRepository


@dataclass
class TokenValidationResult:
    """Outcome of a token check; error is set when valid is False."""

    valid: bool
    user: Optional[User] = None
    error: Optional[str] = None


class ValidateToken:
    """
    Check an access token and resolve its user.

    Never raises for bad tokens; the reason is reported in the result.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        token_decoder: Callable[[str], Dict[str, str]],
    ):
        """
        Initialize use case.

        Args:
            user_repository: User repository
            token_decoder: Decodes an access token into {user_id, email},
                raising AuthenticationError subclasses on failure
        """
        self.user_repository = user_repository
        self.token_decoder = token_decoder

    async def execute(self, token: str) -> TokenValidationResult:
        try:
            payload = self.token_decoder(token)
            user_id = UUID(payload["user_id"])
        except AuthenticationError as e:
            return TokenValidationResult(valid=False, error=e.message)
        except ValueError:
            return TokenValidationResult(valid=False, error="Invalid token")

        user = await self.user_repository.get_by_id(user_id)
        if not user:
            return TokenValidationResult(valid=False, error="User not found")

        return TokenValidationResult(valid=True, user=user)
