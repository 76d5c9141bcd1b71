"""
Integration tests for service and health endpoints.

Usage:
    pytest tests/integration/api/test_health_routes.py
"""

from augure.di.container import get_container


class TestHealthRoutes:
    """Integration tests for health endpoints."""

    async def test_root(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"

    async def test_liveness(self, client):
        response = await client.get("/api/health/live")

        assert response.json() == {"status": "healthy"}

    async def test_readiness(self, client):
        response = await client.get("/api/health/ready")

        assert response.status_code == 200
        assert response.json()["checks"] == {"database": True}

    async def test_readiness_without_database(self, client):
        await get_container().database.disconnect()

        response = await client.get("/api/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"

    async def test_health(self, client):
        response = await client.get("/health")

        assert response.json()["components"]["database"]["status"] == "healthy"

    async def test_request_id_is_echoed(self, client):
        response = await client.get(
            "/api/health/live", headers={"X-Request-ID": "req-123"}
        )

        assert response.headers["x-request-id"] == "req-123"
