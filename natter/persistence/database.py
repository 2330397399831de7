"""Database connection and session management.

Provides the async engine and a per-operation session scope. Each repository
call runs in its own short transaction; connection failures surface as
StoreUnavailableError.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import logfire
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from natter.config import Settings
from natter.domain.error import StoreUnavailableError


def create_engine(settings: Settings) -> AsyncEngine | None:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine, or None when no database URL is configured
    """
    if not settings.database.url:
        logfire.warn("Database URL not configured; comment storage disabled")
        return None

    options: dict = {
        "echo": settings.debug,  # Log SQL queries in debug mode
        "pool_pre_ping": True,  # Verify connections before using
    }
    if not settings.database.url.startswith("sqlite"):
        options["pool_size"] = settings.database.pool_size
        options["max_overflow"] = settings.database.max_overflow

    return create_async_engine(settings.database.url, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
    )


def _is_connection_failure(error: Exception) -> bool:
    if isinstance(error, (OperationalError, InterfaceError)):
        return True
    if isinstance(error, DBAPIError) and error.connection_invalidated:
        return True
    return isinstance(error, OSError)


class Database:
    """Shared handle on the comment store.

    Holds no request state; the engine pool is the only shared resource.
    """

    def __init__(self, engine: AsyncEngine | None) -> None:
        """Initialize database handle.

        Args:
            engine: Async engine, or None if storage is not provisioned
        """
        self.engine = engine
        self.session_factory = create_session_factory(engine) if engine else None

    @property
    def is_configured(self) -> bool:
        """Whether a database has been provisioned."""
        return self.session_factory is not None

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Open a session for a single store operation.

        The session is committed on success and rolled back on error.

        Yields:
            Database session

        Raises:
            StoreUnavailableError: If the store is not provisioned or the
                connection fails
        """
        if self.session_factory is None:
            raise StoreUnavailableError()

        try:
            async with self.session_factory() as session:
                try:
                    yield session
                    await session.commit()
                except Exception as e:
                    logfire.warn("Session rollback", error=str(e))
                    await session.rollback()
                    raise
        except StoreUnavailableError:
            raise
        except Exception as e:
            if _is_connection_failure(e):
                logfire.error("Comment store unreachable", error=str(e))
                raise StoreUnavailableError("Comment store unreachable") from e
            raise

    async def dispose(self) -> None:
        """Close all pooled connections."""
        if self.engine is not None:
            await self.engine.dispose()
