"""Route traffic scoring service.

Scores routes by matching their named segments against the road segments of
a traffic snapshot, then ranks them by estimated travel time.
"""

import logging
from dataclasses import replace
from typing import List, Sequence

from app.models.route import RouteCandidate, ScoredRoute
from app.models.traffic import TrafficReading, TrafficSnapshot
from app.utils.scoring import (
    average_congestion_factor,
    classify_congestion_factor,
    recommendation_for,
    round_half_up,
    segment_congestion_factor,
)

logger = logging.getLogger(__name__)


class RouteTrafficService:
    """Applies traffic conditions to route candidates."""

    def find_affected_readings(
        self, route: RouteCandidate, snapshot: TrafficSnapshot
    ) -> List[TrafficReading]:
        """Readings whose road name contains any of the route's named segments."""
        names = [segment.lower() for segment in route.named_segments]
        return [
            reading
            for reading in snapshot.readings
            if any(name in reading.segment_name.lower() for name in names)
        ]

    def score_route(self, route: RouteCandidate, snapshot: TrafficSnapshot) -> ScoredRoute:
        """Score a route against a traffic snapshot.

        Args:
            route: Route candidate to score
            snapshot: Current traffic conditions

        Returns:
            ScoredRoute with estimated duration, congestion level and average
            congestion factor. The recommendation is assigned by rank_routes.
        """
        affected = self.find_affected_readings(route, snapshot)
        avg_congestion = average_congestion_factor(
            segment_congestion_factor(reading.current_speed, reading.base_speed)
            for reading in affected
        )

        estimated_duration = max(1, round_half_up(route.base_duration_min * avg_congestion))
        congestion_level = classify_congestion_factor(avg_congestion)

        logger.debug(
            f"Scored {route.id}: {len(affected)} affected segments, "
            f"avg_congestion={avg_congestion:.3f}, level={congestion_level}"
        )

        return ScoredRoute(
            route=route,
            estimated_duration_min=estimated_duration,
            congestion_level=congestion_level,
            avg_congestion_factor=avg_congestion,
        )

    def rank_routes(self, scored_routes: Sequence[ScoredRoute]) -> List[ScoredRoute]:
        """Sort routes fastest first and attach recommendations.

        The sort is stable, so ties keep generation order.
        """
        ranked = sorted(scored_routes, key=lambda scored: scored.estimated_duration_min)
        return [
            replace(scored, recommendation=recommendation_for(index, scored.congestion_level))
            for index, scored in enumerate(ranked)
        ]

    def score_routes(
        self, routes: Sequence[RouteCandidate], snapshot: TrafficSnapshot
    ) -> List[ScoredRoute]:
        return self.rank_routes([self.score_route(route, snapshot) for route in routes])
