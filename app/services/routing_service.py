"""Route geometry generation.

Builds the fixed set of route variants between two known locations. Each
variant travels through a hardcoded list of waypoints chosen by whether the
destination is the airport; there is no road graph or path search.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from app.config import MINUTES_PER_KM, ROUTE_VARIANTS
from app.core.exceptions import InvalidLocationError
from app.models.location import Location
from app.models.route import RouteCandidate
from app.repositories.location_repository import LocationRepository
from app.utils.geometry import road_distance_km, smooth_path
from app.utils.scoring import round_half_up

logger = logging.getLogger(__name__)

AIRPORT = "airport"


@dataclass(frozen=True)
class WaypointPlan:
    points: Tuple[str, ...]
    description: str


# Keyed by (variant, destination is the airport)
WAYPOINT_PLANS: Mapping[Tuple[str, bool], WaypointPlan] = MappingProxyType(
    {
        ("orr", True): WaypointPlan(
            ("hebbal",),
            "via Outer Ring Road through Hebbal",
        ),
        ("central", True): WaypointPlan(
            ("majestic", "hebbal"),
            "via City Center through Majestic and Hebbal",
        ),
        ("peripheral", True): WaypointPlan(
            ("marathahalli", "hebbal"),
            "via Peripheral Route through Marathahalli and Hebbal",
        ),
        ("orr", False): WaypointPlan(
            ("hebbal", "marathahalli"),
            "via Outer Ring Road through Hebbal and Marathahalli",
        ),
        ("central", False): WaypointPlan(
            ("majestic", "indiranagar"),
            "via City Center through Majestic and Indiranagar",
        ),
        ("peripheral", False): WaypointPlan(
            ("whitefield", "electronic-city"),
            "via Peripheral Route through Whitefield and Electronic City",
        ),
    }
)


class RoutingService:
    """Generates candidate route geometries between named locations."""

    def __init__(self, repository: Optional[LocationRepository] = None):
        self.repository = repository or LocationRepository()

    def resolve(self, name: str) -> Location:
        """Resolve a location name or raise InvalidLocationError."""
        location = self.repository.resolve_location(name)
        if location is None:
            raise InvalidLocationError()
        return location

    def get_waypoints(self, variant: str, destination: Location) -> WaypointPlan:
        return WAYPOINT_PLANS[(variant, destination.name == AIRPORT)]

    def build_route(
        self,
        variant: str,
        multiplier: float,
        origin: Location,
        destination: Location,
        origin_label: Optional[str] = None,
        destination_label: Optional[str] = None,
    ) -> RouteCandidate:
        """Build one route variant.

        Args:
            variant: Variant key (orr, central or peripheral)
            multiplier: Distance multiplier of the variant
            origin: Resolved origin location
            destination: Resolved destination location
            origin_label: Origin name as the caller wrote it, echoed in the result
            destination_label: Destination name as the caller wrote it

        Returns:
            RouteCandidate with a smoothed polyline through the variant's waypoints
        """
        plan = self.get_waypoints(variant, destination)
        waypoints = [self.resolve(point) for point in plan.points]

        stops = [(origin.lat, origin.lng)]
        stops.extend((waypoint.lat, waypoint.lng) for waypoint in waypoints)
        stops.append((destination.lat, destination.lng))

        distance_km = (
            road_distance_km((origin.lat, origin.lng), (destination.lat, destination.lng))
            * multiplier
        )

        return RouteCandidate(
            id=f"route-{variant}",
            name=f"Route {plan.description}",
            variant=variant,
            distance_km=distance_km,
            base_duration_min=round_half_up(distance_km * MINUTES_PER_KM),
            named_segments=(origin.name, *plan.points, destination.name),
            description=plan.description,
            coordinates=tuple(smooth_path(stops)),
            origin=origin_label or origin.name,
            destination=destination_label or destination.name,
        )

    def generate_routes(self, origin: str, destination: str) -> List[RouteCandidate]:
        """Generate every route variant between two named locations.

        Args:
            origin: Origin location name (case-insensitive)
            destination: Destination location name (case-insensitive)

        Returns:
            Routes in generation order: orr, central, peripheral

        Raises:
            InvalidLocationError: Either name is unknown
        """
        origin_location = self.resolve(origin)
        destination_location = self.resolve(destination)

        routes = [
            self.build_route(
                variant,
                multiplier,
                origin_location,
                destination_location,
                origin_label=origin,
                destination_label=destination,
            )
            for variant, multiplier in ROUTE_VARIANTS.items()
        ]

        logger.debug(
            f"Generated {len(routes)} routes from {origin_location.name} "
            f"to {destination_location.name}"
        )
        return routes
