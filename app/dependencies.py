"""FastAPI dependencies."""

from fastapi import Depends

from app.repositories.location_repository import LocationRepository
from app.services.route_planner import RoutePlanner
from app.services.routing_service import RoutingService
from app.services.traffic_service import TrafficService

# Reference data is read-only and shared by every request
_location_repository = LocationRepository()


def get_location_repository() -> LocationRepository:
    return _location_repository


def get_traffic_service(
    repository: LocationRepository = Depends(get_location_repository),
) -> TrafficService:
    """Traffic simulator using the wall clock and a fresh random source."""
    return TrafficService(repository)


def get_route_planner(
    repository: LocationRepository = Depends(get_location_repository),
    traffic_service: TrafficService = Depends(get_traffic_service),
) -> RoutePlanner:
    """Build a route planner for the current request."""
    return RoutePlanner(
        repository=repository,
        routing_service=RoutingService(repository),
        traffic_service=traffic_service,
    )
