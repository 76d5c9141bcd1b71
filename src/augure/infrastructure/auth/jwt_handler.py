"""
JWT token handler for authentication.
Provides access/refresh token creation and validation.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from augure.config.settings import get_settings
from augure.domain.exceptions.auth import ExpiredTokenError, InvalidTokenError

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


def _encode(payload: dict) -> str:
    settings = get_settings()
    return jwt.encode(
        payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM
    )


def create_access_token(user_id: UUID, email: str) -> str:
    """
    Create JWT access token for authenticated user.

    Args:
        user_id: User UUID
        email: Account email

    Returns:
        Encoded JWT token string

    Example:
        >>> token = create_access_token(user_id=UUID("..."), email="a@b.io")
    """
    now = datetime.now(timezone.utc)
    expire = now + timedelta(hours=get_settings().JWT_EXPIRATION_HOURS)
    return _encode(
        {
            "sub": str(user_id),
            "email": email,
            "iat": now,
            "exp": expire,
            "type": ACCESS_TOKEN_TYPE,
        }
    )


def create_refresh_token(user_id: UUID) -> str:
    """
    Create long-lived refresh token.

    Args:
        user_id: User UUID

    Returns:
        Encoded JWT token string
    """
    now = datetime.now(timezone.utc)
    expire = now + timedelta(days=get_settings().JWT_REFRESH_EXPIRATION_DAYS)
    return _encode(
        {
            "sub": str(user_id),
            "iat": now,
            "exp": expire,
            "type": REFRESH_TOKEN_TYPE,
        }
    )


def decode_access_token(token: str) -> Dict[str, str]:
    """
    Decode and validate JWT access token.

    Args:
        token: JWT token string

    Returns:
        Dictionary with user_id and email

    Raises:
        ExpiredTokenError: If token has expired
        InvalidTokenError: If token is invalid, malformed or not an
            access token

    Example:
        >>> payload = decode_access_token("eyJhbG...")
        >>> payload["user_id"]
    """
    settings = get_settings()

    try:
        payload = jwt.decode(
            token,
            settings.JWT_SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except ExpiredSignatureError:
        raise ExpiredTokenError()
    except JWTError:
        raise InvalidTokenError()

    user_id = payload.get("sub")
    if not user_id or payload.get("type") != ACCESS_TOKEN_TYPE:
        raise InvalidTokenError()

    return {
        "user_id": user_id,
        "email": payload.get("email", ""),
    }


def extract_user_id(token: str) -> UUID:
    """
    Extract user ID from access token.

    Raises:
        InvalidTokenError: If token is invalid or subject is not a UUID
        ExpiredTokenError: If token has expired
    """
    payload = decode_access_token(token)
    try:
        return UUID(payload["user_id"])
    except ValueError:
        raise InvalidTokenError()
