"""Input schemas for catalog operations.

Pydantic models validated at the API boundary and passed to
CatalogService as-is.
"""

from enum import Enum

from pydantic import BaseModel, Field


class Gender(str, Enum):
    """Target gender of a product."""

    MEN = "men"
    WOMEN = "women"
    KID = "kid"
    UNISEX = "unisex"


class ProductCreate(BaseModel):
    """Fields for a new product."""

    title: str = Field(..., min_length=1, description="Display name, unique")
    price: float = Field(default=0, ge=0, description="Unit price")
    description: str | None = Field(default=None, description="Long description")
    slug: str | None = Field(
        default=None, min_length=1, description="URL-safe id, derived from title if omitted"
    )
    stock: int = Field(default=0, ge=0, description="Units in stock")
    sizes: list[str] = Field(default_factory=list, description="Available sizes")
    gender: Gender = Field(..., description="Target gender")
    tags: list[str] = Field(default_factory=list, description="Search tags")
    images: list[str] = Field(default_factory=list, description="Image URLs, in order")


class ProductUpdate(BaseModel):
    """Partial product update.

    Only fields that were explicitly set are applied. ``images``, when
    set, replaces the whole image list.
    """

    title: str | None = Field(default=None, min_length=1)
    price: float | None = Field(default=None, ge=0)
    description: str | None = None
    slug: str | None = Field(default=None, min_length=1)
    stock: int | None = Field(default=None, ge=0)
    sizes: list[str] | None = None
    gender: Gender | None = None
    tags: list[str] | None = None
    images: list[str] | None = None
