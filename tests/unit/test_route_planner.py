"""Unit tests for RoutePlanner."""

from unittest.mock import Mock

import pytest

from app.core.exceptions import (
    IdenticalEndpointsError,
    InvalidLocationError,
    MissingParameterError,
)
from app.services.route_planner import RoutePlanner
from app.services.traffic_service import TrafficService
from app.utils.scoring import RECOMMENDED


@pytest.fixture
def traffic_service(calm_snapshot):
    """Traffic service mock that returns free-flowing traffic."""
    service = Mock(spec=TrafficService)
    service.simulate_traffic.return_value = calm_snapshot
    return service


@pytest.fixture
def planner(repository, traffic_service):
    return RoutePlanner(repository=repository, traffic_service=traffic_service)


def test_calm_traffic_scenario(planner, traffic_service):
    """Koramangala to Whitefield with every segment at base speed."""
    ranked = planner.get_alternate_routes("koramangala", "whitefield")

    assert len(ranked) == 3
    assert {s.route.id for s in ranked} == {"route-orr", "route-central", "route-peripheral"}
    for scored in ranked:
        assert scored.congestion_level == "LOW"
        assert scored.avg_congestion_factor == 1
        assert scored.estimated_duration_min == scored.route.base_duration_min

    assert ranked[0].route.variant == "orr"
    assert ranked[0].recommendation == RECOMMENDED
    assert traffic_service.simulate_traffic.call_count == 1


def test_sorted_by_estimated_duration(repository, rush_hour_service):
    planner = RoutePlanner(repository=repository, traffic_service=rush_hour_service)

    for origin, destination in [
        ("koramangala", "airport"),
        ("majestic", "whitefield"),
        ("electronic-city", "hebbal"),
    ]:
        ranked = planner.get_alternate_routes(origin, destination)
        durations = [s.estimated_duration_min for s in ranked]

        assert len(ranked) == 3
        assert durations == sorted(durations)
        assert ranked[0].recommendation == RECOMMENDED


def test_airport_routes_pass_old_airport_road(repository, rush_hour_service):
    """Old Airport Road slows every airport route equally."""
    planner = RoutePlanner(repository=repository, traffic_service=rush_hour_service)

    ranked = planner.get_alternate_routes("koramangala", "airport")

    for scored in ranked:
        assert scored.avg_congestion_factor > 1
        assert scored.estimated_duration_min > scored.route.base_duration_min


def test_identical_endpoints(planner, traffic_service):
    with pytest.raises(IdenticalEndpointsError, match="cannot be the same"):
        planner.get_alternate_routes("hebbal", "Hebbal")

    traffic_service.simulate_traffic.assert_not_called()


def test_unknown_origin_skips_traffic_simulation(planner, traffic_service):
    with pytest.raises(InvalidLocationError, match="Invalid location specified"):
        planner.get_alternate_routes("atlantis", "whitefield")

    assert traffic_service.simulate_traffic.call_count == 0


def test_unknown_destination(planner, traffic_service):
    with pytest.raises(InvalidLocationError):
        planner.get_alternate_routes("whitefield", "atlantis")

    traffic_service.simulate_traffic.assert_not_called()


@pytest.mark.parametrize("origin,destination", [(None, "airport"), ("airport", ""), ("", "")])
def test_missing_endpoints(planner, traffic_service, origin, destination):
    with pytest.raises(MissingParameterError):
        planner.get_alternate_routes(origin, destination)

    traffic_service.simulate_traffic.assert_not_called()


def test_traffic_failure_propagates(repository):
    traffic_service = Mock(spec=TrafficService)
    traffic_service.simulate_traffic.side_effect = RuntimeError("random source exhausted")
    planner = RoutePlanner(repository=repository, traffic_service=traffic_service)

    with pytest.raises(RuntimeError, match="random source exhausted"):
        planner.get_alternate_routes("koramangala", "whitefield")
