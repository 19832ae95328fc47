from httpx import AsyncClient

from common.core.config import settings


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    async def test_health_check(self, client: AsyncClient):
        """Test health check endpoint."""
        response = await client.get("/api/v1/health/")
        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "service": settings.otel_service_name,
        }

    async def test_billing_health_configured(self, client: AsyncClient, monkeypatch):
        """Test billing health reports a configured key."""
        monkeypatch.setattr(settings, "autumn_secret_key", "am_sk_env")
        response = await client.get("/api/v1/health/billing")
        assert response.json() == {"status": "healthy", "billing": "configured"}

    async def test_billing_health_missing_key(self, client: AsyncClient, no_env_secret_key):
        """Test billing health reports a missing key."""
        response = await client.get("/api/v1/health/billing")
        assert response.status_code == 200
        assert response.json()["billing"] == "missing_secret_key"
