"""Tests for health, root and fallback endpoints."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestHealthCheck:
    """Tests for GET /health."""

    async def test_health_check(self, client: AsyncClient):
        """Should return ok status with uptime."""
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["environment"] == "test"
        assert data["uptime"] >= 0
        assert data["timestamp"].endswith("Z")


class TestRoot:
    async def test_endpoint_map(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Reelforge"
        assert data["endpoints"]["content"]["generate"] == "POST /api/content/generate"
        assert data["endpoints"]["jobs"]["run"] == "POST /api/jobs/run/{job_name}"


class TestNotFound:
    async def test_unknown_route(self, client: AsyncClient):
        response = await client.get("/api/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"status": "error", "message": "Endpoint not found"}
