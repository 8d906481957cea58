"""Authentication service implementation."""

from typing import Optional

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import Settings, get_settings
from ...security import create_access_token, get_username_from_token, hash_password, verify_password
from ..exceptions import AuthenticationError, ConflictError, ValidationError
from ..logging import get_logger
from ..repositories.user_repository import UserRepository
from .interfaces import IAuthService

logger = get_logger("services.auth")


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: Optional[AsyncSession], settings: Optional[Settings] = None):
        self.session = session
        self.user_repo = UserRepository(session)
        self.settings = settings or get_settings()

    async def register(self, username: Optional[str], password: Optional[str]) -> str:
        """Register new user and return a fresh token."""
        if not username or not password:
            raise ValidationError("Username and password both needed to register.")

        if await self.user_repo.is_username_taken(username):
            raise ConflictError("Username already exists.")

        # bcrypt is CPU bound, keep it off the event loop
        hashed_password = await run_in_threadpool(
            hash_password, password, rounds=self.settings.password_hash_rounds
        )
        # a concurrent registration of the same name surfaces here as ConflictError
        await self.user_repo.create_user({"username": username, "password_hash": hashed_password})

        logger.info(f"Registered user {username}")
        return self.issue_token(username)

    async def login(self, username: Optional[str], password: Optional[str]) -> str:
        """Login user and return a fresh token."""
        if not username or not password:
            raise ValidationError("Username and password both needed to login.")

        user = await self.user_repo.get_by_username(username)
        if not user or not await run_in_threadpool(verify_password, password, user.password_hash):
            logger.warning(f"Failed login attempt for {username}")
            raise AuthenticationError("Authentication failed.")

        return self.issue_token(user.username)

    def issue_token(self, username: str) -> str:
        """Sign a token carrying the username, valid for the configured lifetime."""
        return create_access_token(username, settings=self.settings)

    def verify_token(self, token: Optional[str]) -> str:
        """Return the token's username, or raise AuthenticationError."""
        if not token:
            raise AuthenticationError("Unauthorized.")

        username = get_username_from_token(token, self.settings)
        if not username:
            raise AuthenticationError("Unauthorized.")
        return username
