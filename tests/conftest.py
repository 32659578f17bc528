"""Shared fixtures.

Every test gets a fresh in-memory SQLite database with the catalog
tables created.
"""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from catalog_api.infrastructure.database import Base
from catalog_api.products.models import Product, ProductImage  # noqa: F401
from catalog_api.products.schemas import ProductCreate
from catalog_api.products.service import CatalogService


# ============================================================================
# Database Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """Create an in-memory database with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test database."""
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Open a session on the test database."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def catalog_service(session: AsyncSession) -> CatalogService:
    """Catalog service bound to the test session."""
    return CatalogService(session)


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def shirt() -> ProductCreate:
    """A product with two images."""
    return ProductCreate(
        title="Men's Chill Shirt",
        price=45,
        description="Soft cotton shirt",
        stock=10,
        sizes=["S", "M", "L"],
        gender="men",
        tags=["Shirt", "Cotton"],
        images=["a.jpg", "b.jpg"],
    )
