"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from ..config import Settings, get_settings


def create_access_token(
    username: str,
    expires_delta: Optional[timedelta] = None,
    issued_at: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Sign ``{sub, iat, exp}`` for the given username."""
    settings = settings or get_settings()
    issued_at = issued_at or datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    to_encode = {"sub": username, "iat": issued_at, "exp": issued_at + expires_delta}
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str, settings: Optional[Settings] = None) -> Optional[Dict[str, Any]]:
    """Decode and validate an access token.

    Returns None for a bad signature, a malformed token or an expired one.
    """
    settings = settings or get_settings()
    try:
        return jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError:
        return None


def get_username_from_token(token: str, settings: Optional[Settings] = None) -> Optional[str]:
    """Extract the username (``sub`` claim) from a valid token."""
    payload = decode_access_token(token, settings)
    if not payload:
        return None

    username = payload.get("sub")
    if not isinstance(username, str) or not username:
        return None
    return username
