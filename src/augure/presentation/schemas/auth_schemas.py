"""
Authentication API schemas.
"""

from typing import Optional

from pydantic import Field

from augure.presentation.schemas.base import CamelModel
from augure.presentation.schemas.user_schemas import PreferenceScores, UserResponse

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterRequest(CamelModel):
    """Request to create an account."""

    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1, max_length=128)
    preferences: Optional[PreferenceScores] = None


class LoginRequest(CamelModel):
    """Request to log in with email and password."""

    email: str = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class ValidateTokenRequest(CamelModel):
    """Request to check an access token."""

    token: str = Field(..., min_length=1)


class UpdatePasswordRequest(CamelModel):
    """Request to change the caller's password."""

    current_password: str = Field(..., min_length=1, max_length=128)
    new_password: str = Field(..., min_length=1, max_length=128)


class AuthResponse(CamelModel):
    """Issued credentials."""

    user: UserResponse
    token: str
    refresh_token: str


class ValidateTokenResponse(CamelModel):
    """Token check outcome; user is set when valid, error otherwise."""

    valid: bool
    user: Optional[UserResponse] = None
    error: Optional[str] = None
