"""Catalog domain errors and identifier helpers."""

from catalog_api.domain.exceptions import (
    CatalogError,
    DuplicateKeyError,
    InternalServiceError,
    ProductNotFoundError,
    SeedError,
)
from catalog_api.domain.identifiers import is_uuid, normalize_slug, normalize_tags

__all__ = [
    # Exceptions
    "CatalogError",
    "DuplicateKeyError",
    "InternalServiceError",
    "ProductNotFoundError",
    "SeedError",
    # Identifiers
    "is_uuid",
    "normalize_slug",
    "normalize_tags",
]
