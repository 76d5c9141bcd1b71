"""
PBKDF2 password hashing.

Encoded format: pbkdf2_sha256$<iterations>$<salt b64>$<hash b64>
"""

import base64
import os

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from augure.domain.services.i_password_hasher import IPasswordHasher

ALGORITHM = "pbkdf2_sha256"
DEFAULT_ITERATIONS = 390000
SALT_BYTES = 16
KEY_BYTES = 32


class PBKDF2PasswordHasher(IPasswordHasher):
    """Salted PBKDF2-HMAC-SHA256 hasher."""

    def __init__(self, iterations: int = DEFAULT_ITERATIONS):
        if iterations < 1:
            raise ValueError("iterations must be positive")
        self.iterations = iterations

    @staticmethod
    def _kdf(salt: bytes, iterations: int) -> PBKDF2HMAC:
        return PBKDF2HMAC(
            algorithm=hashes.SHA256(),
            length=KEY_BYTES,
            salt=salt,
            iterations=iterations,
        )

    def hash(self, password: str) -> str:
        """
        Hash password with a fresh random salt.

        Args:
            password: Clear text password

        Returns:
            Encoded hash string
        """
        salt = os.urandom(SALT_BYTES)
        key = self._kdf(salt, self.iterations).derive(password.encode("utf-8"))
        return "$".join(
            [
                ALGORITHM,
                str(self.iterations),
                base64.b64encode(salt).decode("ascii"),
                base64.b64encode(key).decode("ascii"),
            ]
        )

    def verify(self, password: str, encoded: str) -> bool:
        """
        Check password against encoded hash in constant time.

        Args:
            password: Clear text password
            encoded: Value produced by hash()

        Returns:
            True if password matches
        """
        try:
            algorithm, iterations, salt_b64, key_b64 = encoded.split("$")
            if algorithm != ALGORITHM:
                return False
            salt = base64.b64decode(salt_b64)
            expected = base64.b64decode(key_b64)
            kdf = self._kdf(salt, int(iterations))
        except ValueError:
            return False

        try:
            kdf.verify(password.encode("utf-8"), expected)
        except InvalidKey:
            return False
        return True
