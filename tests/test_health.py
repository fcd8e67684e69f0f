"""Tests for health check endpoints."""

from fastapi.testclient import TestClient

from app.infrastructure.config import settings


class TestHealthEndpoints:
    """Tests for /health and /ready."""

    def test_health_check(self, client: TestClient) -> None:
        """Health check should return service info."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "service": settings.service_name,
            "version": settings.api_version,
        }

    def test_readiness_check(self, client: TestClient) -> None:
        """Readiness check should report ready once stores exist."""
        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready"}

    def test_health_outside_api_prefix(self, client: TestClient) -> None:
        """Health is not mounted under the API prefix."""
        response = client.get(f"{settings.api_prefix}/health")

        assert response.status_code == 404
