"""User repository for database operations."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import ConflictError, InternalError
from ..logging import get_logger
from ..models.user import User

logger = get_logger("repositories.user")


class UserRepository:
    """Repository for user database operations."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_user(self, user_data: dict) -> User:
        """Create new user; a duplicate username raises ConflictError."""
        user = User(**user_data)
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(f"Username {user_data.get('username')!r} already exists")
            raise ConflictError("Username already exists.") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Failed to create user: {e}")
            raise InternalError(str(e)) from e
        await self.session.refresh(user)
        return user

    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        stmt = select(User).where(User.username == username)
        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as e:
            raise InternalError(str(e)) from e
        return result.scalar_one_or_none()

    async def is_username_taken(self, username: str) -> bool:
        """Check if username exists."""
        user = await self.get_by_username(username)
        return user is not None
