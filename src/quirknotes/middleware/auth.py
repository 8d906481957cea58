"""Authentication middleware."""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, get_settings
from ..core.exceptions import AuthenticationError
from ..core.services import AuthService
from ..database import get_db_session


class JWTBearer(HTTPBearer):
    """Pulls the raw token out of ``Authorization: Bearer <token>``.

    Missing headers and other schemes are rejected with 401 rather than
    HTTPBearer's default 403.
    """

    def __init__(self):
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> str:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials or not credentials.credentials:
            raise AuthenticationError("Unauthorized.")
        return credentials.credentials


bearer_scheme = JWTBearer()


def get_auth_service(
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    """Auth service bound to the request's session."""
    return AuthService(session, settings)


# Dependency for getting the current username from the JWT
async def get_current_username(
    token: str = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> str:
    """Get current authenticated username."""
    return auth_service.verify_token(token)
