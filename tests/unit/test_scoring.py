"""Unit tests for scoring utilities."""

import pytest

from app.utils.scoring import (
    BACKUP_ROUTE,
    GOOD_ALTERNATIVE,
    RECOMMENDED,
    average_congestion_factor,
    classify_congestion_factor,
    classify_congestion_percent,
    get_time_period,
    recommendation_for,
    round_half_up,
    segment_congestion_factor,
)


def test_get_time_period():
    """Test time period bucketing, bounds inclusive."""
    assert get_time_period(0) == "night"
    assert get_time_period(5) == "night"
    assert get_time_period(6) == "normal"
    assert get_time_period(8) == "normal"
    assert get_time_period(9) == "morning-rush"
    assert get_time_period(11) == "morning-rush"
    assert get_time_period(12) == "normal"
    assert get_time_period(16) == "normal"
    assert get_time_period(17) == "evening-rush"
    assert get_time_period(20) == "evening-rush"
    assert get_time_period(21) == "normal"
    assert get_time_period(22) == "normal"
    assert get_time_period(23) == "night"


@pytest.mark.parametrize(
    "percent,level",
    [
        (0, "LOW"),
        (24, "LOW"),
        (25, "MODERATE"),
        (49, "MODERATE"),
        (50, "HIGH"),
        (74, "HIGH"),
        (75, "SEVERE"),
        (99, "SEVERE"),
    ],
)
def test_classify_congestion_percent(percent, level):
    assert classify_congestion_percent(percent) == level


def test_classify_congestion_factor():
    """Test route congestion levels from the average factor."""
    assert classify_congestion_factor(1.0) == "LOW"
    assert classify_congestion_factor(1.15) == "LOW"
    assert classify_congestion_factor(1.16) == "MODERATE"
    assert classify_congestion_factor(1.4) == "MODERATE"
    assert classify_congestion_factor(1.41) == "HIGH"
    assert classify_congestion_factor(1.8) == "HIGH"
    assert classify_congestion_factor(1.81) == "SEVERE"
    assert classify_congestion_factor(3.0) == "SEVERE"


def test_segment_congestion_factor():
    assert segment_congestion_factor(60, 60) == 1.0
    assert segment_congestion_factor(30, 60) == pytest.approx(2.0)
    assert segment_congestion_factor(45, 60) == pytest.approx(4 / 3)

    # Faster than base speed never speeds the trip up
    assert segment_congestion_factor(75, 60) == 1.0


def test_average_congestion_factor():
    assert average_congestion_factor([2.0, 1.0]) == pytest.approx(1.5)
    assert average_congestion_factor([1.0, 1.0, 1.0]) == 1.0

    # No matched segments means no penalty
    assert average_congestion_factor([]) == 1.0

    # Clamped so traffic never reduces the base duration
    assert average_congestion_factor([0.5]) == 1.0


def test_recommendation_for():
    assert recommendation_for(0, "SEVERE") == RECOMMENDED
    assert recommendation_for(0, "LOW") == RECOMMENDED
    assert recommendation_for(1, "LOW") == GOOD_ALTERNATIVE
    assert recommendation_for(2, "MODERATE") == BACKUP_ROUTE
    assert recommendation_for(1, "SEVERE") == BACKUP_ROUTE

    assert RECOMMENDED == "RECOMMENDED - Fastest Route"
    assert GOOD_ALTERNATIVE == "Good Alternative - Light Traffic"
    assert BACKUP_ROUTE == "Backup Route - Higher Congestion"


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(46.5) == 47
    assert round_half_up(22.49) == 22
    assert round_half_up(31.2) == 31
    assert round_half_up(0.0) == 0
