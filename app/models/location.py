"""Reference data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """Named point in the city."""

    name: str
    lat: float
    lng: float


@dataclass(frozen=True)
class RoadSegment:
    """Named stretch of road with its uncongested speed in km/h."""

    id: int
    name: str
    base_speed: int
