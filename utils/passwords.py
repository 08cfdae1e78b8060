"""bcrypt password hashing helpers."""

from __future__ import annotations

from functools import lru_cache

from flask import current_app
from passlib.context import CryptContext

DEFAULT_BCRYPT_ROUNDS = 12


@lru_cache(maxsize=None)
def _context(rounds: int) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def _configured_context() -> CryptContext:
    rounds = int(current_app.config.get("BCRYPT_ROUNDS", DEFAULT_BCRYPT_ROUNDS))
    return _context(rounds)


def hash_password(password: str) -> str:
    """Return a bcrypt hash using the configured cost factor."""

    return _configured_context().hash(password)


def verify_password(password: str, password_hash: str | None) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""

    if not password_hash:
        return False
    try:
        return _configured_context().verify(password, password_hash)
    except ValueError:
        # Stored value is not a recognizable bcrypt hash.
        return False
