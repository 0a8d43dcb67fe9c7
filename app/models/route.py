"""Route models."""

from dataclasses import dataclass
from typing import Tuple

LatLng = Tuple[float, float]


@dataclass(frozen=True)
class RouteCandidate:
    """Route geometry between two locations before traffic is applied."""

    id: str
    name: str
    variant: str
    distance_km: float
    base_duration_min: int
    named_segments: Tuple[str, ...]
    description: str
    coordinates: Tuple[LatLng, ...]
    origin: str
    destination: str


@dataclass(frozen=True)
class ScoredRoute:
    """Route candidate annotated with current traffic and a recommendation."""

    route: RouteCandidate
    estimated_duration_min: int
    congestion_level: str
    avg_congestion_factor: float
    recommendation: str = ""
