"""
Task Tracker API - Health Endpoint Tests
"""

import pytest
from fastapi.testclient import TestClient

from tracker.main import app
from tracker.config import settings


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_healthy_status(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_includes_service_info(self, client):
        """Health endpoint should include service name and version."""
        data = client.get("/health").json()
        assert data["service"] == settings.APP_NAME
        assert data["version"] == settings.APP_VERSION


class TestRootEndpoint:
    """Tests for the root endpoint."""

    def test_root_includes_service_info(self, client):
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert "service" in data
        assert "version" in data
