"""Product catalog.

Models, repository and service for products and their images.
"""

from catalog_api.products.models import Product, ProductImage
from catalog_api.products.repository import ProductRepository
from catalog_api.products.schemas import Gender, ProductCreate, ProductUpdate
from catalog_api.products.service import CatalogService, PaginationParams

__all__ = [
    # Models
    "Product",
    "ProductImage",
    # Repository
    "ProductRepository",
    # Schemas
    "Gender",
    "ProductCreate",
    "ProductUpdate",
    # Service
    "CatalogService",
    "PaginationParams",
]
