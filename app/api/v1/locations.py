"""Location catalog API endpoints."""

from typing import List

from fastapi import APIRouter, Depends

from app.dependencies import get_location_repository
from app.repositories.location_repository import LocationRepository
from app.schemas.route import LocationResponse

router = APIRouter()


@router.get("", response_model=List[LocationResponse], summary="List known locations")
async def list_locations(
    repository: LocationRepository = Depends(get_location_repository),
):
    """Locations accepted as route origin or destination."""
    return [LocationResponse.from_location(location) for location in repository.list_locations()]
