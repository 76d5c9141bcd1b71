"""
Unit tests for password hashing and JWT handling.

Usage:
    pytest tests/unit/infrastructure/test_auth.py
"""

import asyncio
import threading
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from jose import jwt

from augure.domain.exceptions import ExpiredTokenError, InvalidTokenError
from augure.domain.services.i_password_hasher import IPasswordHasher
from augure.infrastructure.auth.jwt_handler import (
    create_access_token,
    create_refresh_token,
    decode_access_token,
    extract_user_id,
)
from augure.infrastructure.auth.password_hasher import PBKDF2PasswordHasher


class TestPBKDF2PasswordHasher:
    """Unit tests for PBKDF2PasswordHasher."""

    def test_hash_and_verify(self):
        hasher = PBKDF2PasswordHasher(iterations=1000)

        encoded = hasher.hash("correct horse")

        assert encoded.startswith("pbkdf2_sha256$1000$")
        assert hasher.verify("correct horse", encoded)
        assert not hasher.verify("wrong horse", encoded)

    def test_salt_is_random(self):
        hasher = PBKDF2PasswordHasher(iterations=1000)

        assert hasher.hash("same") != hasher.hash("same")

    def test_verify_uses_encoded_iterations(self):
        encoded = PBKDF2PasswordHasher(iterations=1200).hash("secret")

        assert PBKDF2PasswordHasher(iterations=1000).verify("secret", encoded)

    @pytest.mark.parametrize(
        "encoded",
        ["", "plain", "md5$1$abc$def", "pbkdf2_sha256$notanumber$abc$def"],
    )
    def test_verify_malformed(self, encoded):
        assert not PBKDF2PasswordHasher(iterations=1000).verify("x", encoded)

    def test_invalid_iterations(self):
        with pytest.raises(ValueError):
            PBKDF2PasswordHasher(iterations=0)


class GatedHasher(IPasswordHasher):
    """Blocks in hash/verify until another task opens the gate."""

    def __init__(self):
        self.gate = threading.Event()

    def hash(self, password: str) -> str:
        return "released" if self.gate.wait(timeout=2) else "blocked"

    def verify(self, password: str, encoded: str) -> bool:
        return self.gate.wait(timeout=2)


class TestAsyncHashing:
    """Async hashing must leave the event loop free."""

    async def _open_gate(self, hasher: GatedHasher) -> None:
        await asyncio.sleep(0)
        hasher.gate.set()

    async def test_hash_async_runs_off_loop(self):
        hasher = GatedHasher()

        result, _ = await asyncio.gather(
            hasher.hash_async("s3cret-pass"), self._open_gate(hasher)
        )

        assert result == "released"

    async def test_verify_async_runs_off_loop(self):
        hasher = GatedHasher()

        matched, _ = await asyncio.gather(
            hasher.verify_async("s3cret-pass", "encoded"), self._open_gate(hasher)
        )

        assert matched is True

    async def test_pbkdf2_async_matches_sync(self):
        hasher = PBKDF2PasswordHasher(iterations=1000)

        encoded = await hasher.hash_async("correct horse")

        assert hasher.verify("correct horse", encoded)
        assert await hasher.verify_async("correct horse", encoded)
        assert not await hasher.verify_async("wrong horse", encoded)


class TestJWTHandler:
    """Unit tests for JWT creation and validation."""

    def test_access_token_round_trip(self):
        user_id = uuid4()

        token = create_access_token(user_id, "a@b.io")
        payload = decode_access_token(token)

        assert payload == {"user_id": str(user_id), "email": "a@b.io"}
        assert extract_user_id(token) == user_id

    def test_refresh_token_is_not_access_token(self):
        token = create_refresh_token(uuid4())

        with pytest.raises(InvalidTokenError):
            decode_access_token(token)

    def test_expired_token(self, settings):
        past = datetime.now(timezone.utc) - timedelta(hours=1)
        token = jwt.encode(
            {"sub": str(uuid4()), "exp": past, "type": "access"},
            settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )

        with pytest.raises(ExpiredTokenError) as exc_info:
            decode_access_token(token)

        assert exc_info.value.message == "Token expired"

    def test_wrong_signature(self, settings):
        token = jwt.encode(
            {"sub": str(uuid4()), "type": "access"},
            "another-secret",
            algorithm=settings.JWT_ALGORITHM,
        )

        with pytest.raises(InvalidTokenError):
            decode_access_token(token)

    def test_garbage_token(self):
        with pytest.raises(InvalidTokenError) as exc_info:
            decode_access_token("not.a.jwt")

        assert exc_info.value.message == "Invalid token"

    def test_non_uuid_subject(self, settings):
        token = jwt.encode(
            {"sub": "alice", "type": "access"},
            settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )

        with pytest.raises(InvalidTokenError):
            extract_user_id(token)
