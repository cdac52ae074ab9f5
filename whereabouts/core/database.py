"""Database configuration and session management."""

import logging
import typing as t

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from whereabouts.core.config import SETTINGS

LOGGER: logging.Logger = logging.getLogger(__name__)


class Base(DeclarativeBase):  # pylint: disable=too-few-public-methods
    """Base class for all database models."""


# The engine owns the connection pool shared by all requests
ENGINE: AsyncEngine = create_async_engine(
    SETTINGS.database_url,
    echo=SETTINGS.database_echo,
    pool_pre_ping=True,
)

# Create async session factory
ASYNC_SESSION_MAKER: async_sessionmaker[AsyncSession] = async_sessionmaker(
    ENGINE,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> t.AsyncGenerator[AsyncSession, None]:
    """Dependency borrowing one session from the pool per request.

    The session is committed when the handler returns and rolled back
    if it raises.

    Yields:
        AsyncSession: An asynchronous database session.
    """
    async with ASYNC_SESSION_MAKER() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            LOGGER.debug("Rolling back request session")
            await session.rollback()
            raise


async def init_db() -> None:
    """Initialize database tables."""
    async with ENGINE.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    LOGGER.debug("Created tables on %s", ENGINE.url.render_as_string())


async def close_db() -> None:
    """Dispose of the connection pool."""
    await ENGINE.dispose()
    LOGGER.debug("Connection pool disposed")
