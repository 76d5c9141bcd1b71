"""
User entity - Domain model for platform accounts.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from augure.domain.clock import utc_now

MIN_PASSWORD_LENGTH = 8


@dataclass
class User:
    """
    User entity - email/password account.

    Email is stored lower-cased and is unique across accounts.
    The password is never held in clear, only its encoded hash.
    """

    email: str
    password_hash: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        """Validate user data after initialization."""
        if not self.email or "@" not in self.email:
            raise ValueError("Valid email is required")

        if not self.password_hash:
            raise ValueError("Password hash is required")

        self.email = self.email.strip().lower()

    def change_password_hash(self, password_hash: str) -> None:
        """Replace stored password hash."""
        if not password_hash:
            raise ValueError("Password hash is required")
        self.password_hash = password_hash
        self.updated_at = utc_now()

    def to_dict(self) -> dict:
        """Convert entity to public dictionary representation."""
        return {
            "id": str(self.id),
            "email": self.email,
        }
