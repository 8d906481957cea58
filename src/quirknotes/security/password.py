"""Password hashing utilities."""

from functools import lru_cache
from typing import Optional

from passlib.context import CryptContext

from ..config import get_settings


@lru_cache(maxsize=8)
def get_pwd_context(rounds: int) -> CryptContext:
    """Hashing context for the given bcrypt cost factor.

    bcrypt_sha256 pre-hashes with SHA-256 so passwords longer than bcrypt's
    72-byte limit are not silently truncated.
    """
    return CryptContext(schemes=["bcrypt_sha256"], deprecated="auto", bcrypt_sha256__rounds=rounds)


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """Hash a password with a fresh salt."""
    rounds = rounds or get_settings().password_hash_rounds
    return get_pwd_context(rounds).hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash; malformed hashes never verify."""
    context = get_pwd_context(get_settings().password_hash_rounds)
    try:
        return context.verify(plain_password, hashed_password)
    except ValueError:
        return False
