"""Catalog service for product operations.

High-level service that combines repository operations with error
translation and transaction handling.
"""

from dataclasses import dataclass
from typing import Any, NoReturn

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.domain.exceptions import (
    CatalogError,
    DuplicateKeyError,
    InternalServiceError,
    ProductNotFoundError,
)
from catalog_api.domain.identifiers import is_uuid
from catalog_api.infrastructure.config import settings
from catalog_api.infrastructure.database import transaction
from catalog_api.infrastructure.logging import get_logger
from catalog_api.products.models import Product
from catalog_api.products.repository import ProductRepository
from catalog_api.products.schemas import ProductCreate, ProductUpdate

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"

# Columns that may be explicitly cleared on update
NULLABLE_FIELDS = {"description"}


@dataclass
class PaginationParams:
    """Pagination parameters.

    Attributes:
        limit: Maximum number of products in the page.
        offset: Number of products to skip.
    """

    limit: int = settings.default_page_limit
    offset: int = 0


def is_unique_violation(error: IntegrityError) -> bool:
    """Check whether an integrity error comes from a unique constraint."""
    orig = error.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate == UNIQUE_VIOLATION:
        return True
    return "UNIQUE constraint failed" in str(orig)


def unique_violation_detail(error: IntegrityError) -> str:
    """Extract the conflict detail from a unique violation."""
    orig = error.orig
    # asyncpg keeps "Key (slug)=(...) already exists." on the wrapped error
    cause = getattr(orig, "__cause__", None)
    detail = getattr(cause, "detail", None) or getattr(orig, "detail", None)
    return detail or str(orig)


class CatalogService:
    """Service for product catalog operations.

    Example usage:
        async with async_session_factory() as session:
            service = CatalogService(session)
            product = await service.create(
                ProductCreate(title="Shirt", gender="men", images=["a.jpg"])
            )
            page = await service.find_all(PaginationParams(limit=5))
    """

    def __init__(
        self,
        session: AsyncSession,
        logger: structlog.typing.FilteringBoundLogger | None = None,
    ) -> None:
        """Initialize service with database session.

        Args:
            session: Async SQLAlchemy session.
            logger: Logger for unexpected failures.
        """
        self.session = session
        self.repository = ProductRepository(session)
        self.logger = logger or get_logger("CatalogService")

    async def create(self, data: ProductCreate) -> dict[str, Any]:
        """Create a product with its images.

        Args:
            data: Product fields and image URLs.

        Returns:
            Flattened product.

        Raises:
            DuplicateKeyError: If the title or slug is already taken.
            InternalServiceError: On any other storage failure.
        """
        fields = data.model_dump(mode="json", exclude={"images"})
        product = self.repository.build(fields, data.images)

        try:
            async with transaction(self.session):
                await self.repository.save(product)
        except Exception as e:
            self.handle_exception(e)

        return product.to_dict()

    async def find_all(self, pagination: PaginationParams | None = None) -> list[dict[str, Any]]:
        """List a page of products.

        Args:
            pagination: Page bounds, defaults to the first page.

        Returns:
            Flattened products in creation order.
        """
        pagination = pagination or PaginationParams()
        products = await self.repository.find_all(
            limit=pagination.limit,
            offset=pagination.offset,
        )
        return [product.to_dict() for product in products]

    async def find_one(self, term: str) -> Product:
        """Find a product by id, title or slug.

        UUID terms are looked up by primary key only. Other terms match
        the title case-insensitively or the slug.

        Args:
            term: Product id, title or slug.

        Returns:
            Product with images loaded.

        Raises:
            ProductNotFoundError: If nothing matches.
        """
        if is_uuid(term):
            product = await self.repository.get_by_id(term.lower())
        else:
            product = await self.repository.find_by_term(term)

        if product is None:
            raise ProductNotFoundError(term)
        return product

    async def find_one_plain(self, term: str) -> dict[str, Any]:
        """Find a product and return it flattened."""
        product = await self.find_one(term)
        return product.to_dict()

    async def update(self, product_id: str, data: ProductUpdate) -> dict[str, Any]:
        """Apply a partial update to a product.

        Field changes and the optional image replacement are committed
        together or not at all.

        Args:
            product_id: Product ID.
            data: Fields to change; ``images`` replaces the image list.

        Returns:
            Flattened product after the update.

        Raises:
            ProductNotFoundError: If the product does not exist.
            DuplicateKeyError: If the new title or slug is already taken.
            InternalServiceError: On any other storage failure.
        """
        if not is_uuid(product_id):
            raise ProductNotFoundError(product_id)
        product_id = product_id.lower()

        changes = {
            key: value
            for key, value in data.model_dump(
                mode="json", exclude_unset=True, exclude={"images"}
            ).items()
            if value is not None or key in NULLABLE_FIELDS
        }

        try:
            async with transaction(self.session):
                product = await self.repository.preload(product_id, changes)
                if product is None:
                    raise ProductNotFoundError(product_id)

                if data.images is not None:
                    await self.repository.replace_images(product, data.images)

                await self.repository.save(product)
        except Exception as e:
            self.handle_exception(e)

        return await self.find_one_plain(product_id)

    async def remove(self, product_id: str) -> dict[str, Any]:
        """Delete a product and its images.

        Args:
            product_id: Product ID.

        Returns:
            Flattened product as it was before deletion.

        Raises:
            ProductNotFoundError: If the product does not exist.
            InternalServiceError: On storage failure.
        """
        if not is_uuid(product_id):
            raise ProductNotFoundError(product_id)
        product_id = product_id.lower()

        product = await self.repository.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        removed = product.to_dict()
        try:
            async with transaction(self.session):
                await self.repository.delete(product)
        except Exception as e:
            self.handle_exception(e)

        return removed

    async def delete_all_products(self) -> int:
        """Delete every product and image.

        Returns:
            Number of deleted products.

        Raises:
            InternalServiceError: On storage failure.
        """
        try:
            async with transaction(self.session):
                deleted = await self.repository.delete_all()
        except Exception as e:
            self.handle_exception(e)

        self.logger.info("Deleted all products", deleted=deleted)
        return deleted

    def handle_exception(self, error: Exception) -> NoReturn:
        """Translate a storage failure into a catalog error.

        Unique violations become DuplicateKeyError and catalog errors are
        re-raised unchanged. Anything else is logged and replaced by a
        generic InternalServiceError.

        Args:
            error: The caught exception.

        Raises:
            CatalogError: Always.
        """
        if isinstance(error, CatalogError):
            raise error
        if isinstance(error, IntegrityError) and is_unique_violation(error):
            raise DuplicateKeyError(unique_violation_detail(error)) from error

        self.logger.error(
            "Unexpected catalog failure",
            error=str(error),
            error_type=type(error).__name__,
            exc_info=error,
        )
        raise InternalServiceError() from error
