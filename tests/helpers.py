"""Shared test helpers."""

from datetime import datetime
from typing import Callable

from app.models.traffic import TrafficReading, TrafficSnapshot
from app.repositories.location_repository import ROAD_SEGMENTS
from app.utils.scoring import classify_congestion_percent, round_half_up


class FixedRandom:
    """Random source that always draws the same value in [0, 1)."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.value


def fixed_clock(moment: datetime) -> Callable[[], datetime]:
    return lambda: moment


def make_snapshot(speeds: dict | None = None, weather: str = "clear") -> TrafficSnapshot:
    """Snapshot where every segment runs at base speed unless overridden.

    Args:
        speeds: Mapping of segment name to current speed
        weather: Weather to record on the snapshot
    """
    speeds = speeds or {}
    readings = []
    for segment in ROAD_SEGMENTS:
        current = speeds.get(segment.name, segment.base_speed)
        percent = max(0, round_half_up((segment.base_speed - current) / segment.base_speed * 100))
        readings.append(
            TrafficReading(
                segment_id=segment.id,
                segment_name=segment.name,
                base_speed=segment.base_speed,
                current_speed=current,
                congestion_percent=percent,
                level=classify_congestion_percent(percent),
            )
        )
    return TrafficSnapshot(
        timestamp=datetime(2025, 3, 10, 14, 0),
        weather=weather,
        time_period="normal",
        readings=tuple(readings),
    )
