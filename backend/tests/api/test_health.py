"""Tests for health check endpoints."""

import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import get_mongo_database


@pytest.fixture
def database():
    return MagicMock()


@pytest.fixture
def client(database):
    app = create_app()
    app.dependency_overrides[get_mongo_database] = lambda: database
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    @pytest.mark.parametrize("path", ["/", "/api/health"])
    def test_health_check(self, client, path):
        """Health endpoint should return 200 with status."""
        response = client.get(path)
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_health_response_structure(self, client):
        data = client.get("/api/health").json()
        assert set(data.keys()) == {"status", "version"}

    def test_readiness_check(self, client, database):
        """Readiness endpoint should return 200 when the database answers."""
        database.ping.return_value = True

        response = client.get("/api/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "database": "connected"}

    def test_readiness_database_down(self, client, database):
        database.ping.return_value = False

        response = client.get("/api/ready")

        assert response.status_code == 503
        assert response.json() == {"status": "not_ready", "database": "unreachable"}
