"""
Authentication dependency for JWT bearer tokens.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from augure.di.container import get_container
from augure.di.dependencies import get_db_session
from augure.domain.entities.user import User
from augure.domain.exceptions import AuthenticationError
from augure.infrastructure.auth.jwt_handler import extract_user_id

# Missing credentials are reported through AuthenticationError, not 403
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    session: AsyncSession = Depends(get_db_session),
) -> User:
    """
    Extract and load current authenticated user from JWT token.

    Args:
        credentials: HTTP Authorization header with Bearer token
        session: Database session from dependency injection

    Returns:
        User domain entity

    Raises:
        AuthenticationError: If token is missing, invalid, expired, or
            its user no longer exists
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Missing authentication token")

    user_id = extract_user_id(credentials.credentials)

    user = await get_container().get_user_repository(session).get_by_id(user_id)
    if not user:
        raise AuthenticationError("User not found")

    return user

