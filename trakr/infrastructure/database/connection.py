"""Database connection and session management."""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from trakr.core.config import settings


def normalize_database_url(url: str) -> str:
    """Point plain postgres URLs at the asyncpg driver."""
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


class DatabaseSessionManager:
    """
    Manages database connections and sessions.

    Uses SQLAlchemy async engine for non-blocking database operations.
    """

    def __init__(self):
        self._engine = None
        self._sessionmaker = None

    def init(self, database_url: str | None = None, **engine_options: Any):
        """
        Initialize the database engine and session factory.

        Args:
            database_url: Optional override for the database URL
            engine_options: Extra create_async_engine arguments
                (e.g. poolclass for in-memory SQLite)
        """
        url = normalize_database_url(database_url or settings.database_url)

        engine_args: Dict[str, Any] = {"echo": settings.debug, "pool_pre_ping": True}
        # SQLite uses a single-connection pool that rejects sizing arguments
        if not url.startswith("sqlite"):
            engine_args["pool_size"] = settings.db_pool_size
            engine_args["max_overflow"] = settings.db_max_overflow
        engine_args.update(engine_options)

        self._engine = create_async_engine(url, **engine_args)

        self._sessionmaker = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )

    async def create_tables(self):
        """Create the record table if it does not exist."""
        from .models import Base

        if self._engine is None:
            raise RuntimeError("Database not initialized. Call init() first.")
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self):
        """Close the database engine."""
        if self._engine:
            await self._engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Provide a transactional scope around operations.

        Yields:
            An async database session
        """
        if self._sessionmaker is None:
            raise RuntimeError("Database not initialized. Call init() first.")

        session = self._sessionmaker()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


db_manager = DatabaseSessionManager()
