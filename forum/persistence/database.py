"""Database engine, session factory and the per-request unit of work."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from forum.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    """Create the asyncpg-backed engine.

    Args:
        database: Database section of the settings
        echo: Log emitted SQL
    """
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory.

    Objects stay usable after commit because responses are built from
    them once the request transaction has ended.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def unit_of_work(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Open a session whose work commits or rolls back as one transaction.

    A reaction's ledger write and its counter update run in the same
    unit of work, so they are stored together or not at all.

    Yields:
        Session for the unit of work
    """
    async with session_factory() as session:
        try:
            yield session
        except Exception as e:
            logfire.warn("Unit of work rolled back", error=str(e))
            await session.rollback()
            raise
        await session.commit()
