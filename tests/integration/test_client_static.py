"""Integration tests for serving the map client."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api.v1 import locations
from app.main import mount_client


@pytest.fixture
def client_dir(tmp_path):
    (tmp_path / "index.html").write_text("<html><body>Traffic map</body></html>")
    (tmp_path / "app.js").write_text("console.log('map');")
    return tmp_path


@pytest.fixture
def static_client(client_dir) -> TestClient:
    application = FastAPI()
    application.include_router(locations.router, prefix="/api/locations")
    mount_client(application, str(client_dir))
    return TestClient(application)


def test_root_serves_index(static_client: TestClient):
    response = static_client.get("/")

    assert response.status_code == 200
    assert "Traffic map" in response.text


def test_client_route_falls_back_to_index(static_client: TestClient):
    response = static_client.get("/some/client/route")

    assert response.status_code == 200
    assert "Traffic map" in response.text


def test_existing_asset_is_served(static_client: TestClient):
    response = static_client.get("/app.js")

    assert response.status_code == 200
    assert response.text == "console.log('map');"


def test_api_routes_take_precedence(static_client: TestClient):
    response = static_client.get("/api/locations")

    assert response.status_code == 200
    assert response.json()[0]["name"] == "koramangala"


def test_missing_directory_is_not_mounted(tmp_path):
    application = FastAPI()
    mount_client(application, str(tmp_path / "missing"))
    mount_client(application, None)

    assert TestClient(application).get("/").status_code == 404
