"""Alternate route planning.

Validates the requested endpoints, generates route geometries, takes a
traffic snapshot and returns the ranked, annotated routes.
"""

import logging
from typing import List, Optional

from app.core.exceptions import (
    IdenticalEndpointsError,
    InvalidLocationError,
    MissingParameterError,
)
from app.models.route import ScoredRoute
from app.repositories.location_repository import LocationRepository
from app.services.route_traffic_service import RouteTrafficService
from app.services.routing_service import RoutingService
from app.services.traffic_service import TrafficService

logger = logging.getLogger(__name__)


class RoutePlanner:
    """Combines route generation and traffic scoring for one request."""

    def __init__(
        self,
        repository: Optional[LocationRepository] = None,
        routing_service: Optional[RoutingService] = None,
        traffic_service: Optional[TrafficService] = None,
        scoring_service: Optional[RouteTrafficService] = None,
    ):
        self.repository = repository or LocationRepository()
        self.routing_service = routing_service or RoutingService(self.repository)
        self.traffic_service = traffic_service or TrafficService(self.repository)
        self.scoring_service = scoring_service or RouteTrafficService()

    def validate_endpoints(self, origin: Optional[str], destination: Optional[str]) -> None:
        """Check the endpoints before any traffic is simulated.

        Raises:
            MissingParameterError: Either endpoint is empty
            IdenticalEndpointsError: Both endpoints name the same place
            InvalidLocationError: Either endpoint is unknown
        """
        if not origin or not destination:
            raise MissingParameterError()

        if origin.lower() == destination.lower():
            raise IdenticalEndpointsError()

        if (
            self.repository.resolve_location(origin) is None
            or self.repository.resolve_location(destination) is None
        ):
            raise InvalidLocationError()

    def get_alternate_routes(
        self, origin: Optional[str], destination: Optional[str]
    ) -> List[ScoredRoute]:
        """Get ranked route options between two locations.

        Args:
            origin: Origin location name
            destination: Destination location name

        Returns:
            Scored routes sorted by estimated duration, fastest first
        """
        logger.info(f"Calculating routes between {origin} and {destination}")
        self.validate_endpoints(origin, destination)

        routes = self.routing_service.generate_routes(origin, destination)
        snapshot = self.traffic_service.simulate_traffic()
        logger.info(f"Current time period: {snapshot.time_period}, weather: {snapshot.weather}")

        ranked = self.scoring_service.score_routes(routes, snapshot)
        logger.info(
            f"Routes calculated: {len(ranked)}, recommended {ranked[0].route.id} "
            f"({ranked[0].estimated_duration_min} min)"
        )
        return ranked
