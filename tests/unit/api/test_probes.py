"""Tests for internal k8s probe endpoints."""

import pytest
from httpx import AsyncClient


class TestProbeEndpoints:
    """Tests for /healthz probe endpoint."""

    @pytest.mark.asyncio
    async def test_healthz_returns_ok_status(self, client: AsyncClient):
        """Healthz endpoint should return status ok."""
        response = await client.get("/healthz")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    @pytest.mark.asyncio
    async def test_healthz_not_in_openapi(self, client: AsyncClient):
        """Healthz should not appear in OpenAPI schema."""
        response = await client.get("/openapi.json")
        if response.status_code == 200:
            paths = response.json().get("paths", {})
            assert "/healthz" not in paths
            assert "/api/auth/autumn/checkout" in paths
