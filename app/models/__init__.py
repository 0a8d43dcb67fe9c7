"""Domain models."""

from app.models.location import Location, RoadSegment
from app.models.route import RouteCandidate, ScoredRoute
from app.models.traffic import TrafficReading, TrafficSnapshot

__all__ = [
    "Location",
    "RoadSegment",
    "TrafficReading",
    "TrafficSnapshot",
    "RouteCandidate",
    "ScoredRoute",
]
