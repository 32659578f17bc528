"""FastAPI dependencies for the catalog API."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from catalog_api.infrastructure.database import get_session, get_session_factory
from catalog_api.products.service import CatalogService
from catalog_api.seed.service import SeedService


def get_catalog_service(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CatalogService:
    """Get catalog service bound to the request session."""
    return CatalogService(session)


def get_seed_service(
    session_factory: Annotated[async_sessionmaker[AsyncSession], Depends(get_session_factory)],
) -> SeedService:
    """Get seed service."""
    return SeedService(session_factory)
