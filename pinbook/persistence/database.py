"""Async engine and session handling for PostgreSQL.

One session spans one API request. Vote and delete flows issue several
statements through it, and they commit or roll back together.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from pinbook.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the async engine for ``database.url``.

    Args:
        database: Connection URL and pool sizing
        echo: Log every SQL statement

    Returns:
        Configured async engine
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def get_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    """Open a session that commits on success and rolls back on error.

    Only exceptions that propagate into the closing request scope roll back.
    Whether a domain error already turned into an HTTP response gets here is
    up to the web framework, so a partially applied vote may or may not be
    committed; its applied steps are logged for reconciliation either way.

    Yields:
        Database session
    """
    async with session_factory() as session:
        try:
            yield session
        except Exception as e:
            await session.rollback()
            logfire.warn(
                "Transaction rolled back", error=str(e), error_type=type(e).__name__
            )
            raise
        await session.commit()
