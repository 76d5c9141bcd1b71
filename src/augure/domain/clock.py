"""
Single time source for the domain.

Every timestamp Augure produces (row timestamps, analysedAt) is a
timezone-aware UTC datetime.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
