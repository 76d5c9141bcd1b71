"""
External integration exceptions.

Raised by market data and text generation clients. After retries are
exhausted these surface unchanged and map to HTTP 500.
"""

from augure.domain.exceptions.base import AugureException


class IntegrationError(AugureException):
    """Base error for failures talking to an external API."""

    def __init__(self, message: str):
        super().__init__(message, code="INTEGRATION_ERROR")


class MarketDataError(IntegrationError):
    """Raised when the price API fails or returns unusable data."""


class InsightGenerationError(IntegrationError):
    """Raised when the text generation API fails or returns nothing."""
