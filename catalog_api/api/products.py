"""Product API endpoints.

Provides CRUD endpoints for the product catalog.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from catalog_api.api.deps import get_catalog_service
from catalog_api.api.schemas import ErrorResponse, ProductResponse
from catalog_api.infrastructure.config import settings
from catalog_api.products.schemas import ProductCreate, ProductUpdate
from catalog_api.products.service import CatalogService, PaginationParams

router = APIRouter(prefix="/products", tags=["Products"])


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create product",
)
async def create_product(
    body: ProductCreate,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> dict:
    """Create a product with its images.

    Returns:
        Created product.
    """
    return await service.create(body)


@router.get(
    "",
    response_model=list[ProductResponse],
    summary="List products",
)
async def list_products(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    limit: Annotated[int, Query(ge=1)] = settings.default_page_limit,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[dict]:
    """List a page of products in creation order.

    Returns:
        Products in the page.
    """
    return await service.find_all(PaginationParams(limit=limit, offset=offset))


@router.get(
    "/{term}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get product",
    description="Look up a product by id, title or slug.",
)
async def get_product(
    term: str,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> dict:
    """Get a single product."""
    return await service.find_one_plain(term)


@router.patch(
    "/{product_id}",
    response_model=ProductResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update product",
)
async def update_product(
    product_id: str,
    body: ProductUpdate,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> dict:
    """Update product fields and optionally replace its images.

    Returns:
        Updated product.
    """
    return await service.update(product_id, body)


@router.delete(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Delete product",
)
async def delete_product(
    product_id: str,
    service: Annotated[CatalogService, Depends(get_catalog_service)],
) -> dict:
    """Delete a product and its images.

    Returns:
        The deleted product.
    """
    return await service.remove(product_id)
