"""Pytest configuration and fixtures."""

import os
from datetime import datetime
from typing import Generator

import pytest
from fastapi.testclient import TestClient

# Set test environment
os.environ["APP_ENV"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"  # Disable rate limiting in tests

from app.main import app
from app.models.traffic import TrafficSnapshot
from app.repositories.location_repository import LocationRepository
from app.services.traffic_service import TrafficService
from tests.helpers import FixedRandom, fixed_clock, make_snapshot


@pytest.fixture
def repository() -> LocationRepository:
    return LocationRepository()


@pytest.fixture
def calm_snapshot() -> TrafficSnapshot:
    """Every segment flowing at its base speed."""
    return make_snapshot()


@pytest.fixture
def rush_hour_service(repository) -> TrafficService:
    """Deterministic simulator: July evening rush, rain, neutral random factor."""
    return TrafficService(
        repository,
        clock=fixed_clock(datetime(2025, 7, 14, 18, 0)),
        rng=FixedRandom(0.5),
    )


@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """Create a test client, clearing dependency overrides afterwards."""
    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
