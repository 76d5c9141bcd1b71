"""
Domain exceptions package.
"""

# Auth exceptions
from augure.domain.exceptions.auth import (
    AuthenticationError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
)

# Base exceptions
from augure.domain.exceptions.base import (
    AugureException,
    ConflictError,
    DuplicateEntityError,
    EntityNotFoundError,
    ForbiddenError,
    ValidationError,
)

# Integration exceptions
from augure.domain.exceptions.integration import (
    InsightGenerationError,
    IntegrationError,
    MarketDataError,
)

__all__ = [
    # Base
    "AugureException",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "ConflictError",
    "ValidationError",
    "ForbiddenError",
    # Auth
    "AuthenticationError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "ExpiredTokenError",
    # Integration
    "IntegrationError",
    "MarketDataError",
    "InsightGenerationError",
]
