"""
Logging and metrics.
"""

from augure.infrastructure.monitoring.logger import (
    JSONFormatter,
    RequestIdFilter,
    get_logger,
    get_request_id,
    reset_request_id,
    set_request_id,
    setup_logging,
)

__all__ = [
    "JSONFormatter",
    "RequestIdFilter",
    "get_logger",
    "get_request_id",
    "reset_request_id",
    "set_request_id",
    "setup_logging",
]
