"""Product repository for database operations.

Provides CRUD operations for products and their images. Image cleanup
on delete is done here explicitly rather than relying on database
cascades, so every backend behaves the same.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog_api.products.models import Product, ProductImage


class ProductRepository:
    """Repository for Product database operations.

    Example usage:
        async with get_session() as session:
            repo = ProductRepository(session)
            products = await repo.find_all(limit=10, offset=0)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session.
        """
        self.session = session

    def build(self, fields: dict[str, Any], image_urls: Iterable[str] = ()) -> Product:
        """Create an unsaved product with new images bound to it.

        Args:
            fields: Product column values.
            image_urls: Image URLs, in display order.

        Returns:
            Transient product.
        """
        return Product(
            **fields,
            images=[ProductImage(url=url) for url in image_urls],
        )

    async def save(self, product: Product) -> Product:
        """Save a product to database.

        Args:
            product: Product to save.

        Returns:
            Saved product.

        Raises:
            IntegrityError: If a uniqueness constraint is violated.
        """
        self.session.add(product)
        await self.session.flush()
        return product

    async def get_by_id(self, product_id: str) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        query = select(Product).where(Product.id == product_id)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def find_by_term(self, term: str) -> Product | None:
        """Find a product by title (case-insensitive) or slug.

        Args:
            term: Title or slug.

        Returns:
            First matching product, None if nothing matches.
        """
        query = (
            select(Product)
            .where(
                or_(
                    func.upper(Product.title) == term.upper(),
                    Product.slug == term.lower(),
                )
            )
            .limit(1)
        )
        result = await self.session.execute(query)
        return result.scalars().first()

    async def find_all(self, limit: int = 10, offset: int = 0) -> Sequence[Product]:
        """Find a page of products in creation order.

        Args:
            limit: Maximum results.
            offset: Result offset for pagination.

        Returns:
            Sequence of products with images loaded.
        """
        query = (
            select(Product)
            .order_by(Product.created_at.asc(), Product.id.asc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(query)
        return result.scalars().all()

    async def preload(self, product_id: str, changes: dict[str, Any]) -> Product | None:
        """Load a product and merge field changes onto it.

        Changes are applied in memory only; nothing is flushed.

        Args:
            product_id: Product ID.
            changes: Column values to overwrite.

        Returns:
            Merged product, None if the product does not exist.
        """
        product = await self.get_by_id(product_id)
        if product is None:
            return None

        for key, value in changes.items():
            setattr(product, key, value)
        return product

    async def delete_images(self, product: Product) -> None:
        """Delete all images of a product.

        Args:
            product: Persistent product with images loaded.
        """
        product.images.clear()
        await self.session.flush()

    async def replace_images(self, product: Product, image_urls: Iterable[str]) -> None:
        """Delete all images of a product and attach new ones.

        The deletes are flushed before the new images are attached.

        Args:
            product: Persistent product.
            image_urls: New image URLs, in display order.
        """
        await self.delete_images(product)
        product.images.extend(ProductImage(url=url) for url in image_urls)

    async def delete(self, product: Product) -> None:
        """Delete a product and its images.

        Images are deleted first, then the product row.

        Args:
            product: Persistent product.
        """
        await self.delete_images(product)
        await self.session.delete(product)
        await self.session.flush()

    async def delete_all(self) -> int:
        """Delete every product and image.

        Returns:
            Number of deleted products.
        """
        await self.session.execute(delete(ProductImage))
        result = await self.session.execute(delete(Product))
        return result.rowcount
