"""Command line interface for traffic snapshots and route recommendations."""

import argparse
import json
import logging
import random
import sys
from datetime import datetime
from typing import List, Optional

from app.core.exceptions import TrafficRouteException
from app.repositories.location_repository import LocationRepository
from app.schemas.route import LocationResponse, RouteResponse
from app.schemas.traffic import TrafficSnapshotResponse
from app.services.route_planner import RoutePlanner
from app.services.traffic_service import TrafficService, local_now

logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def build_traffic_service(
    repository: LocationRepository, at: Optional[datetime], seed: Optional[int]
) -> TrafficService:
    """Traffic simulator pinned to a given instant and seed when provided."""
    clock = (lambda: at) if at else local_now
    return TrafficService(repository, clock=clock, rng=random.Random(seed))


def show_traffic(traffic_service: TrafficService) -> dict:
    snapshot = traffic_service.simulate_traffic()
    return TrafficSnapshotResponse.from_snapshot(snapshot).model_dump(mode="json", by_alias=True)


def show_routes(
    repository: LocationRepository,
    traffic_service: TrafficService,
    origin: str,
    destination: str,
) -> List[dict]:
    planner = RoutePlanner(repository=repository, traffic_service=traffic_service)
    ranked = planner.get_alternate_routes(origin, destination)
    return [
        RouteResponse.from_scored(scored).model_dump(mode="json", by_alias=True)
        for scored in ranked
    ]


def show_locations(repository: LocationRepository) -> List[dict]:
    return [
        LocationResponse.from_location(location).model_dump()
        for location in repository.list_locations()
    ]


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="Bangalore Traffic Router CLI")
    parser.add_argument(
        "--at",
        type=datetime.fromisoformat,
        help="Simulate at this ISO-8601 instant instead of now",
    )
    parser.add_argument("--seed", type=int, help="Seed for the traffic random source")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    subparsers.add_parser("traffic", help="Print a traffic snapshot")

    routes_parser = subparsers.add_parser("routes", help="Print ranked route options")
    routes_parser.add_argument("--origin", required=True, help="Origin location name")
    routes_parser.add_argument("--destination", required=True, help="Destination location name")

    subparsers.add_parser("locations", help="List known locations")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    repository = LocationRepository()
    traffic_service = build_traffic_service(repository, args.at, args.seed)

    try:
        if args.command == "traffic":
            result = show_traffic(traffic_service)
        elif args.command == "routes":
            result = show_routes(repository, traffic_service, args.origin, args.destination)
        else:
            result = show_locations(repository)
    except TrafficRouteException as e:
        logger.error(f"Error: {e.message}")
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
