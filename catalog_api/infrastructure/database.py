"""Database configuration and session management.

Provides async SQLAlchemy engine, session factory and a scoped
transaction helper.
"""

from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from catalog_api.infrastructure.config import settings

# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)

# Session factory
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# Base class for models
Base = declarative_base()


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session.

    Services commit their own units of work; anything left pending when
    the request ends is rolled back by closing the session.

    Yields:
        AsyncSession for database operations.
    """
    async with async_session_factory() as session:
        yield session


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Get the session factory used for work that needs its own sessions."""
    return async_session_factory


@asynccontextmanager
async def transaction(session: AsyncSession) -> AsyncIterator[AsyncSession]:
    """Run a block as one unit of work.

    Commits when the block exits normally and rolls back on any
    exception, which is then re-raised.

    Args:
        session: Session whose current transaction is scoped.

    Yields:
        The same session.
    """
    try:
        yield session
        await session.commit()
    except BaseException:
        await session.rollback()
        raise


async def create_tables() -> None:
    """Create database tables if they don't exist."""
    import catalog_api.products.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
