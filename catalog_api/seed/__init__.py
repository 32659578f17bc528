"""Catalog seeding."""

from catalog_api.seed.data import SEED_PRODUCTS
from catalog_api.seed.service import SEED_CONFIRMATION, SeedService

__all__ = [
    "SEED_CONFIRMATION",
    "SEED_PRODUCTS",
    "SeedService",
]
