"""SQLAlchemy models for the product catalog.

Defines Product and ProductImage tables for persistent storage.
"""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from sqlalchemy import (
    JSON,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    Uuid,
    event,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog_api.domain.identifiers import normalize_slug, normalize_tags
from catalog_api.infrastructure.database import Base


class Product(Base):
    """Product entity in the catalog.

    Attributes:
        id: Unique product identifier (UUID).
        title: Product title, unique.
        price: Unit price.
        description: Product description.
        slug: URL-safe identifier derived from the title, unique.
        stock: Units in stock.
        sizes: Available sizes (e.g. ["S", "M", "L"]).
        gender: Target gender (men, women, kid, unisex).
        tags: Lower-cased search tags.
        images: Owned images, in insertion order.
        created_at: Creation timestamp.
    """

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False, unique=True)
    price: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    slug: Mapped[str] = mapped_column(String(500), nullable=False, unique=True)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    sizes: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    gender: Mapped[str] = mapped_column(String(10), nullable=False)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    # Relationships
    images: Mapped[list["ProductImage"]] = relationship(
        "ProductImage",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductImage.id",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation."""
        return f"<Product(id={self.id}, slug={self.slug})>"

    @property
    def image_urls(self) -> list[str]:
        """Get image URLs in order."""
        return [image.url for image in self.images]

    def check_slug(self) -> None:
        """Derive the slug from the title when missing and normalize it."""
        self.slug = normalize_slug(self.slug or self.title)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the flattened representation.

        Images are reduced to their URLs.

        Returns:
            Dictionary representation.
        """
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "description": self.description,
            "slug": self.slug,
            "stock": self.stock,
            "sizes": list(self.sizes or []),
            "gender": self.gender,
            "tags": list(self.tags or []),
            "images": self.image_urls,
        }


class ProductImage(Base):
    """Image owned by a single product.

    Attributes:
        id: Image identifier, assigned in insertion order.
        url: Image resource reference.
        product_id: Owning product ID.
    """

    __tablename__ = "product_images"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    url: Mapped[str] = mapped_column(String(1000), nullable=False)
    product_id: Mapped[str] = mapped_column(
        Uuid(as_uuid=False),
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    product: Mapped["Product"] = relationship("Product", back_populates="images")

    def __repr__(self) -> str:
        """String representation."""
        return f"<ProductImage(id={self.id}, url={self.url})>"


@event.listens_for(Product, "before_insert")
def _check_slug_insert(mapper: Any, connection: Any, target: Product) -> None:
    target.check_slug()
    target.tags = normalize_tags(target.tags or [])


@event.listens_for(Product, "before_update")
def _check_slug_update(mapper: Any, connection: Any, target: Product) -> None:
    target.check_slug()
    target.tags = normalize_tags(target.tags or [])
