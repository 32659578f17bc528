"""Seed API endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from catalog_api.api.deps import get_seed_service
from catalog_api.api.schemas import ErrorResponse, SeedResponse
from catalog_api.seed.service import SeedService

router = APIRouter(prefix="/seed", tags=["Seed"])


@router.get(
    "",
    response_model=SeedResponse,
    responses={500: {"model": ErrorResponse}},
    summary="Reseed catalog",
    description="Delete all products and insert the seed dataset.",
)
async def run_seed(
    service: Annotated[SeedService, Depends(get_seed_service)],
) -> SeedResponse:
    """Replace the catalog with the seed dataset."""
    message = await service.run_seed()
    return SeedResponse(message=message)
