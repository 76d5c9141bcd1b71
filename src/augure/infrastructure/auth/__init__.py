"""
Authentication infrastructure.
"""

from augure.infrastructure.auth.password_hasher import PBKDF2PasswordHasher

__all__ = ["PBKDF2PasswordHasher"]
