# Database connection setup
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from .config import Settings
from .core.exceptions import InternalError
from .core.logging import get_logger
from .core.models.base import BaseModel

logger = get_logger("database")


class Database:
    """Owns the async engine and session factory for one application instance.

    Built explicitly at startup and closed at shutdown; nothing here is module
    state, so tests can run several instances side by side.
    """

    def __init__(self, url: str, echo: bool = False, **engine_kwargs):
        self.url = url
        self.echo = echo
        self.engine_kwargs = engine_kwargs
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(settings.database_url, echo=settings.database_echo)

    @property
    def is_connected(self) -> bool:
        return self.engine is not None

    async def connect(self, create_schema: bool = True) -> None:
        """Create the engine and session factory, then make sure tables exist."""
        if self.engine is not None:
            return

        self.engine = create_async_engine(self.url, echo=self.echo, **self.engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )
        if create_schema:
            await self.create_tables()
        logger.info("Database connected", extra={"dialect": self.engine.dialect.name})

    async def create_tables(self) -> None:
        """Create all tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        if self.engine is None:
            return
        await self.engine.dispose()
        self.engine = None
        self.session_factory = None
        logger.info("Database connection closed")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Open a session bound to this database."""
        if self.session_factory is None:
            raise InternalError("Database is not connected.")
        async with self.session_factory() as session:
            yield session


async def get_db_session(request: Request) -> AsyncIterator[AsyncSession]:
    """Get database session from the application's Database."""
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
