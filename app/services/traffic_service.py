"""Traffic snapshot simulation service.

Derives the current time period and weather, then simulates congestion on
each road segment. The clock and random source are injectable so snapshots
can be reproduced in tests.
"""

import logging
import random
from datetime import datetime
from typing import Callable, Optional

from app.config import (
    RANDOM_FACTOR_RANGE,
    SEASONAL_WEATHER,
    TIME_OF_DAY_FACTORS,
    WEATHER_FACTORS,
)
from app.models.location import RoadSegment
from app.models.traffic import TrafficReading, TrafficSnapshot
from app.repositories.location_repository import LocationRepository
from app.utils.scoring import (
    classify_congestion_percent,
    get_time_period,
    round_half_up,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def local_now() -> datetime:
    """Current local time, timezone-aware."""
    return datetime.now().astimezone()


class TrafficService:
    """Generates traffic snapshots for the road segment catalog."""

    def __init__(
        self,
        repository: Optional[LocationRepository] = None,
        clock: Clock = local_now,
        rng: Optional[random.Random] = None,
    ):
        self.repository = repository or LocationRepository()
        self.clock = clock
        self.rng = rng or random.Random()

    def get_current_time_period(self, now: Optional[datetime] = None) -> str:
        now = now or self.clock()
        return get_time_period(now.hour)

    def simulate_weather(self, now: Optional[datetime] = None) -> str:
        """Pick the weather with a seasonal bias.

        A single random draw decides the outcome. Outside the monsoon and
        winter months the weather is always clear.
        """
        now = now or self.clock()
        month = now.month - 1
        draw = self.rng.random()

        for months, weather, probability in SEASONAL_WEATHER:
            if month in months:
                return weather if draw < probability else "clear"

        return "clear"

    def calculate_congestion(
        self, segment: RoadSegment, time_factor: float, weather_factor: float
    ) -> TrafficReading:
        """Simulate the reading for one segment.

        Args:
            segment: Road segment to simulate
            time_factor: Slowdown for the current time period
            weather_factor: Slowdown for the current weather

        Returns:
            TrafficReading with rounded speed and congestion percentage
        """
        random_factor = self.rng.uniform(*RANDOM_FACTOR_RANGE)
        current_speed = segment.base_speed / (time_factor * weather_factor * random_factor)

        congestion_percent = round_half_up(
            max(0.0, (segment.base_speed - current_speed) / segment.base_speed * 100)
        )

        return TrafficReading(
            segment_id=segment.id,
            segment_name=segment.name,
            base_speed=segment.base_speed,
            current_speed=round_half_up(current_speed),
            congestion_percent=congestion_percent,
            level=classify_congestion_percent(congestion_percent),
        )

    def simulate_traffic(self) -> TrafficSnapshot:
        """Build a fresh traffic snapshot for now.

        Returns:
            TrafficSnapshot with one reading per road segment, in catalog order
        """
        now = self.clock()
        time_period = self.get_current_time_period(now)
        weather = self.simulate_weather(now)

        time_factor = TIME_OF_DAY_FACTORS[time_period]
        weather_factor = WEATHER_FACTORS[weather]

        logger.info(f"Simulating traffic: time_period={time_period}, weather={weather}")

        readings = tuple(
            self.calculate_congestion(segment, time_factor, weather_factor)
            for segment in self.repository.get_road_segments()
        )

        return TrafficSnapshot(
            timestamp=now,
            weather=weather,
            time_period=time_period,
            readings=readings,
        )
