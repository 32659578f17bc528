"""Seed service.

Replaces the whole catalog with the products from the seed dataset.
"""

import asyncio
from collections.abc import Callable, Sequence
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalog_api.domain.exceptions import SeedError
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.logging import get_logger
from catalog_api.products.schemas import ProductCreate
from catalog_api.products.service import CatalogService
from catalog_api.seed.data import SEED_PRODUCTS

SEED_CONFIRMATION = "SEED EXECUTED"


class SeedService:
    """Service that wipes and repopulates the catalog.

    Inserts run concurrently, each in its own session, with at most
    ``concurrency`` in flight. All inserts run to completion; failures
    are collected and reported together.

    Example usage:
        service = SeedService(async_session_factory)
        await service.run_seed()
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        products: Sequence[dict[str, Any]] = SEED_PRODUCTS,
        concurrency: int = settings.seed_concurrency,
        service_factory: Callable[..., CatalogService] = CatalogService,
        logger: structlog.typing.FilteringBoundLogger | None = None,
    ) -> None:
        """Initialize seed service.

        Args:
            session_factory: Factory for per-task sessions.
            products: Seed dataset, one field set per product.
            concurrency: Maximum concurrent inserts.
            service_factory: Builds a CatalogService from a session and logger.
            logger: Logger for progress and failures.
        """
        if concurrency < 1:
            raise ValueError("concurrency must be at least 1")

        self.session_factory = session_factory
        self.products = products
        self.concurrency = concurrency
        self.service_factory = service_factory
        self.logger = logger or get_logger("SeedService")

    async def run_seed(self) -> str:
        """Delete all products and insert the seed dataset.

        Returns:
            Confirmation message.

        Raises:
            SeedError: If any insert failed.
        """
        deleted = await self._delete_all_products()

        semaphore = asyncio.Semaphore(self.concurrency)
        results = await asyncio.gather(
            *(self._insert_product(item, semaphore) for item in self.products),
            return_exceptions=True,
        )

        failures: dict[str, str] = {}
        for item, result in zip(self.products, results):
            if isinstance(result, Exception):
                title = str(item.get("title", "<untitled>"))
                self.logger.warning(
                    "Failed to insert seed product",
                    title=title,
                    error=str(result),
                )
                failures[title] = str(result)
            elif isinstance(result, BaseException):
                raise result

        if failures:
            raise SeedError(failures)

        self.logger.info(
            "Seed complete",
            deleted=deleted,
            created=len(self.products),
        )
        return SEED_CONFIRMATION

    async def _delete_all_products(self) -> int:
        async with self.session_factory() as session:
            service = self.service_factory(session, logger=self.logger)
            return await service.delete_all_products()

    async def _insert_product(
        self,
        item: dict[str, Any],
        semaphore: asyncio.Semaphore,
    ) -> dict[str, Any]:
        async with semaphore:
            async with self.session_factory() as session:
                service = self.service_factory(session, logger=self.logger)
                return await service.create(ProductCreate(**item))
