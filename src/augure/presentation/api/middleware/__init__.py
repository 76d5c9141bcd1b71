"""API middleware and request dependencies."""

from augure.presentation.api.middleware.error_handler import (
    augure_exception_handler,
    request_validation_handler,
    unhandled_exception_handler,
)
from augure.presentation.api.middleware.metrics_middleware import (
    MetricsMiddleware,
)
from augure.presentation.api.middleware.request_id_middleware import (
    RequestIDMiddleware,
)

__all__ = [
    "augure_exception_handler",
    "request_validation_handler",
    "unhandled_exception_handler",
    "MetricsMiddleware",
    "RequestIDMiddleware",
]
