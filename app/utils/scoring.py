"""Scoring utilities for traffic and congestion calculations.

Pure functions for time-period bucketing, congestion classification and
route recommendation labels.
"""

import math
from typing import Iterable

RECOMMENDED = "RECOMMENDED - Fastest Route"
GOOD_ALTERNATIVE = "Good Alternative - Light Traffic"
BACKUP_ROUTE = "Backup Route - Higher Congestion"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with exact halves going up."""
    return math.floor(value + 0.5)


def get_time_period(hour: int) -> str:
    """Classify an hour of the day into a traffic period.

    Args:
        hour: Hour of day, 0-23

    Returns:
        "morning-rush" (09-11), "evening-rush" (17-20),
        "night" (23-05) or "normal". Bounds are inclusive.
    """
    if 9 <= hour <= 11:
        return "morning-rush"
    if 17 <= hour <= 20:
        return "evening-rush"
    if hour >= 23 or hour <= 5:
        return "night"
    return "normal"


def classify_congestion_percent(congestion_percent: float) -> str:
    """Congestion level of a single road segment.

    Args:
        congestion_percent: Speed loss relative to base speed, 0-100

    Returns:
        LOW (<25), MODERATE (<50), HIGH (<75) or SEVERE
    """
    if congestion_percent < 25:
        return "LOW"
    elif congestion_percent < 50:
        return "MODERATE"
    elif congestion_percent < 75:
        return "HIGH"
    else:
        return "SEVERE"


def classify_congestion_factor(factor: float) -> str:
    """Congestion level of a whole route from its average congestion factor."""
    if factor <= 1.15:
        return "LOW"
    elif factor <= 1.4:
        return "MODERATE"
    elif factor <= 1.8:
        return "HIGH"
    else:
        return "SEVERE"


def segment_congestion_factor(current_speed: float, base_speed: float) -> float:
    """Travel time multiplier for one segment.

    Traffic moving faster than base speed never shortens the trip.
    """
    speed_ratio = current_speed / base_speed
    return 1.0 if speed_ratio > 1 else 1 / speed_ratio


def average_congestion_factor(factors: Iterable[float]) -> float:
    """Mean of the segment factors, clamped to at least 1.

    Returns exactly 1.0 when there are no factors.
    """
    factors = list(factors)
    if not factors:
        return 1.0
    return max(1.0, sum(factors) / len(factors))


def recommendation_for(rank_index: int, congestion_level: str) -> str:
    """Recommendation label for a route at a position in the ranking."""
    if rank_index == 0:
        return RECOMMENDED
    elif congestion_level == "LOW":
        return GOOD_ALTERNATIVE
    else:
        return BACKUP_ROUTE
