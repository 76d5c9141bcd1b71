"""
Persistence layer - database, models, repositories.
"""

from augure.infrastructure.persistence.database import Database

__all__ = ["Database"]
