"""
Resilience patterns for outbound calls.
"""

from augure.infrastructure.resilience.retry import Retry, RetryConfig, with_retry

__all__ = ["Retry", "RetryConfig", "with_retry"]
