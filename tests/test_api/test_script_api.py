"""Tests for the script endpoints."""

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


class TestGenerateScript:
    async def test_generate(self, client: AsyncClient, mock_orchestrator, sample_script):
        mock_orchestrator.script_generator.generate_video_script.return_value = sample_script

        response = await client.post(
            "/api/script/generate",
            json={"topic": "Moon landing computers", "targetAudience": "students"},
        )

        assert response.status_code == 201
        assert response.json()["data"]["hook"] == sample_script.hook
        mock_orchestrator.script_generator.generate_video_script.assert_awaited_once_with(
            topic="Moon landing computers",
            duration=120,
            tone="engaging",
            target_audience="students",
        )

    async def test_topic_required(self, client: AsyncClient):
        response = await client.post("/api/script/generate", json={})

        assert response.status_code == 400
        assert response.json() == {"status": "error", "message": "Topic is required"}


class TestVoiceoverText:
    async def test_voiceover(self, client: AsyncClient, mock_orchestrator):
        mock_orchestrator.script_generator.generate_voiceover_text.return_value = "Hi [PAUSE] there"

        response = await client.post("/api/script/voiceover", json={"script": "Hi there"})

        assert response.status_code == 200
        assert response.json()["data"] == {"voiceover_text": "Hi [PAUSE] there"}

    async def test_script_required(self, client: AsyncClient):
        response = await client.post("/api/script/voiceover", json={})

        assert response.status_code == 400
        assert response.json()["message"] == "Script is required"


class TestVariations:
    async def test_variations(self, client: AsyncClient, mock_orchestrator, sample_script):
        mock_orchestrator.script_generator.generate_script_variations.return_value = [
            sample_script,
            sample_script,
        ]

        response = await client.post("/api/script/variations", json={"topic": "x", "count": 2})

        assert response.status_code == 200
        assert response.json()["count"] == 2
        mock_orchestrator.script_generator.generate_script_variations.assert_awaited_once_with("x", 2)

    async def test_count_bounds(self, client: AsyncClient):
        response = await client.post("/api/script/variations", json={"topic": "x", "count": 11})

        assert response.status_code == 400
        assert response.json()["message"].startswith("count:")
