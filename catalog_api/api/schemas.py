"""API schemas for the catalog API.

Pydantic models for response serialization. Request bodies use the
input schemas from ``catalog_api.products.schemas``.
"""

from pydantic import BaseModel, Field

from catalog_api.products.schemas import Gender


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[dict] | dict = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


class ProductResponse(BaseModel):
    """Product with images flattened to URLs."""

    id: str = Field(..., description="Product ID (UUID)")
    title: str
    price: float
    description: str | None = None
    slug: str
    stock: int
    sizes: list[str] = Field(default_factory=list)
    gender: Gender
    tags: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list, description="Image URLs, in order")


class SeedResponse(BaseModel):
    """Seed confirmation."""

    message: str
