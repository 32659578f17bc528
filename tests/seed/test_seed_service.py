"""Tests for SeedService."""

import asyncio
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalog_api.domain.exceptions import DuplicateKeyError, SeedError
from catalog_api.products.schemas import ProductCreate
from catalog_api.products.service import CatalogService, PaginationParams
from catalog_api.seed.data import SEED_PRODUCTS
from catalog_api.seed.service import SEED_CONFIRMATION, SeedService


class RecordingCatalogService:
    """Catalog stand-in that records calls and tracks concurrency."""

    calls: list[str] = []
    in_flight = 0
    max_in_flight = 0
    failing_titles: set[str] = set()

    def __init__(self, session: AsyncSession, logger: Any = None) -> None:
        self.session = session

    @classmethod
    def reset(cls, failing_titles: set[str] | None = None) -> None:
        cls.calls = []
        cls.in_flight = 0
        cls.max_in_flight = 0
        cls.failing_titles = failing_titles or set()

    async def delete_all_products(self) -> int:
        type(self).calls.append("delete_all")
        return 0

    async def create(self, data: ProductCreate) -> dict[str, Any]:
        cls = type(self)
        cls.in_flight += 1
        cls.max_in_flight = max(cls.max_in_flight, cls.in_flight)
        try:
            await asyncio.sleep(0.01)
            cls.calls.append(data.title)
            if data.title in cls.failing_titles:
                raise DuplicateKeyError(f"Key (title)=({data.title}) already exists.")
            return {"title": data.title, "images": data.images}
        finally:
            cls.in_flight -= 1


def seed_items(count: int) -> list[dict[str, Any]]:
    """Build minimal seed entries."""
    return [{"title": f"Item {i}", "gender": "unisex"} for i in range(count)]


class TestSeedService:
    """Tests for SeedService.run_seed."""

    @pytest.mark.asyncio
    async def test_seed_replaces_catalog(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        """Existing products are removed and the dataset inserted."""
        async with session_factory() as session:
            await CatalogService(session).create(
                ProductCreate(title="Old Product", gender="men", images=["old.jpg"])
            )

        service = SeedService(session_factory, concurrency=1)
        assert await service.run_seed() == SEED_CONFIRMATION

        async with session_factory() as session:
            catalog = CatalogService(session)
            products = await catalog.find_all(PaginationParams(limit=100))
            titles = {product["title"] for product in products}
            assert titles == {item["title"] for item in SEED_PRODUCTS}

            first = SEED_PRODUCTS[0]
            found = await catalog.find_one_plain(first["title"])
            assert found["images"] == first["images"]

    @pytest.mark.asyncio
    async def test_seed_twice(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        """Reseeding does not collide with the previous seed."""
        service = SeedService(session_factory, products=seed_items(3), concurrency=1)
        await service.run_seed()
        await service.run_seed()

        async with session_factory() as session:
            products = await CatalogService(session).find_all()
        assert len(products) == 3

    @pytest.mark.asyncio
    async def test_delete_runs_before_inserts(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        """The catalog is cleared before any insert starts."""
        RecordingCatalogService.reset()
        service = SeedService(
            session_factory,
            products=seed_items(4),
            concurrency=4,
            service_factory=RecordingCatalogService,
        )

        await service.run_seed()

        assert RecordingCatalogService.calls[0] == "delete_all"
        assert sorted(RecordingCatalogService.calls[1:]) == [f"Item {i}" for i in range(4)]

    @pytest.mark.asyncio
    async def test_concurrency_is_bounded(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        """No more than the configured number of inserts run at once."""
        RecordingCatalogService.reset()
        service = SeedService(
            session_factory,
            products=seed_items(10),
            concurrency=3,
            service_factory=RecordingCatalogService,
        )

        await service.run_seed()

        assert RecordingCatalogService.max_in_flight == 3

    @pytest.mark.asyncio
    async def test_failures_are_collected(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        """Every insert runs and all failures are reported together."""
        RecordingCatalogService.reset(failing_titles={"Item 1", "Item 3"})
        service = SeedService(
            session_factory,
            products=seed_items(5),
            concurrency=2,
            service_factory=RecordingCatalogService,
        )

        with pytest.raises(SeedError) as exc_info:
            await service.run_seed()

        assert set(exc_info.value.failures) == {"Item 1", "Item 3"}
        assert len(RecordingCatalogService.calls) == 6

    @pytest.mark.asyncio
    async def test_invalid_seed_entry_is_reported(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        """Entries that fail validation count as failures."""
        RecordingCatalogService.reset()
        service = SeedService(
            session_factory,
            products=[{"title": "No Gender"}],
            service_factory=RecordingCatalogService,
        )

        with pytest.raises(SeedError) as exc_info:
            await service.run_seed()

        assert list(exc_info.value.failures) == ["No Gender"]

    def test_concurrency_must_be_positive(self) -> None:
        """A zero-sized task group is rejected."""
        with pytest.raises(ValueError):
            SeedService(None, concurrency=0)  # type: ignore[arg-type]
