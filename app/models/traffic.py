"""Traffic snapshot models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True)
class TrafficReading:
    """Simulated congestion on one road segment."""

    segment_id: int
    segment_name: str
    base_speed: int
    current_speed: int
    congestion_percent: int
    level: str  # LOW, MODERATE, HIGH or SEVERE


@dataclass(frozen=True)
class TrafficSnapshot:
    """Traffic conditions across all road segments at one instant.

    Readings follow the order of the road segment catalog.
    """

    timestamp: datetime
    weather: str
    time_period: str
    readings: Tuple[TrafficReading, ...]
