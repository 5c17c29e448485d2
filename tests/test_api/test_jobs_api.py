"""Tests for the job endpoints."""

import pytest
from httpx import AsyncClient

from reelforge.schemas.trends import TrendRecord

pytestmark = pytest.mark.asyncio


class TestJobStatus:
    async def test_status(self, client: AsyncClient):
        response = await client.get("/api/jobs/status")

        assert response.status_code == 200
        data = response.json()["data"]
        assert set(data) == {"trendDiscovery", "contentGeneration", "contentPosting"}
        assert data["contentPosting"]["schedule"] == "0 10 * * *"
        assert data["contentPosting"]["running"] is False


class TestRunJob:
    """Tests for POST /api/jobs/run/{job_name}."""

    async def test_run_trend_discovery(self, client: AsyncClient, mock_orchestrator):
        mock_orchestrator.trend_service.get_trending_topics_for_niche.return_value = [
            TrendRecord(title="AI agents")
        ]

        response = await client.post("/api/jobs/run/trendDiscovery")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Job trendDiscovery executed successfully"
        assert body["data"][0]["title"] == "AI agents"

    async def test_last_run_reported(self, client: AsyncClient):
        await client.post("/api/jobs/run/contentPosting")

        response = await client.get("/api/jobs/status")

        assert response.json()["data"]["contentPosting"]["last_run_at"] is not None

    async def test_unknown_job(self, client: AsyncClient):
        response = await client.post("/api/jobs/run/nope")

        assert response.status_code == 404
        assert response.json() == {"status": "error", "message": "Unknown job: nope"}

    async def test_already_running(self, client: AsyncClient, job_scheduler):
        lock = job_scheduler.state.jobs["contentGeneration"].lock
        await lock.acquire()
        try:
            response = await client.post("/api/jobs/run/contentGeneration")
        finally:
            lock.release()

        assert response.status_code == 409
        assert response.json()["message"] == "Job contentGeneration is already running"
