"""Async engine and session factory for the account database."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from desk.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the asyncpg engine.

    Args:
        database: Connection URL and pool sizing
        echo: Log every SQL statement (debug only)

    Returns:
        Async engine with pre-ping enabled
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the per-request session factory.

    Objects stay usable after commit because the user repository commits
    mid-request, before the identity service is called.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
