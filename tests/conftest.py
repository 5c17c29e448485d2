"""
Pytest configuration and fixtures for Reelforge tests.

Provides:
- Test settings via environment (scheduler and webhook off)
- A fake text generator for the LLM-backed providers
- Sample artifacts and trend records
- Test client for API testing with dependency overrides
"""

import os

os.environ.update(
    {
        "ENVIRONMENT": "test",
        "DEBUG": "false",
        "SCHEDULER_ENABLED": "false",
        "WEBHOOK_ENABLED": "false",
        "WEBHOOK_URL": "",
        "OPENAI_API_KEY": "test-key",
    }
)

from collections.abc import AsyncGenerator  # noqa: E402
from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from reelforge.config import Settings, get_settings  # noqa: E402
from reelforge.generation.llm import Completion, TextGenerator  # noqa: E402
from reelforge.schemas.content import (  # noqa: E402
    ContentArtifact,
    SEOMetadata,
    VideoScript,
    VoiceoverAsset,
)
from reelforge.schemas.trends import TrendRecord  # noqa: E402

SAMPLE_SCRIPT = """HOOK: Did you know your phone is smarter than the computers that reached the moon?

MAIN CONTENT:
In 1969, the Apollo guidance computer had 4KB of RAM.
Today, a budget phone has a million times more.

CALL TO ACTION: Subscribe for more mind-blowing tech facts!"""


def completion(text: str, tokens: int | None = 42) -> Completion:
    """Build a Completion as returned by TextGenerator.complete."""
    return Completion(text=text, model="gpt-4o", total_tokens=tokens)


def make_llm(*texts: str) -> MagicMock:
    """
    Fake TextGenerator returning texts in order.

    With a single text, every call returns it.
    """
    llm = MagicMock(spec=TextGenerator)
    if len(texts) == 1:
        llm.complete = AsyncMock(return_value=completion(texts[0]))
    else:
        llm.complete = AsyncMock(side_effect=[completion(t) for t in texts])
    return llm


@pytest.fixture
def settings() -> Settings:
    """Cached settings instance; tests may monkeypatch attributes on it."""
    return get_settings()


@pytest.fixture
def sample_script() -> VideoScript:
    return VideoScript(
        topic="Moon landing computers",
        duration=120,
        hook="Did you know your phone is smarter than the computers that reached the moon?",
        main_content=["In 1969, the Apollo guidance computer had 4KB of RAM."],
        call_to_action="Subscribe for more mind-blowing tech facts!",
        full_script=SAMPLE_SCRIPT,
    )


@pytest.fixture
def sample_artifact(sample_script: VideoScript) -> ContentArtifact:
    """A fully populated artifact."""
    return ContentArtifact(
        id="1767225600000-abc123xyz",
        topic="Moon landing computers",
        niche="technology",
        script=sample_script,
        voiceover=VoiceoverAsset(
            path="output/audio/1767225600000-abc123xyz_voiceover.mp3",
            filename="1767225600000-abc123xyz_voiceover.mp3",
            size=2048,
            provider="openai",
            voice="alloy",
            model="tts-1",
        ),
        seo_metadata=SEOMetadata(
            title="Your Phone vs Apollo 11",
            description="The Apollo computer had 4KB of RAM.\nYour phone has 8GB.\nHere is why that matters.\nWatch to the end.",
            tags=["apollo", "nasa", "smartphones"],
            hashtags=["#tech", "#nasa", "#space"],
            category="Science & Technology",
            keywords=["apollo guidance computer"],
        ),
        broll_suggestions=["rocket launch", "vintage computer"],
    )


@pytest.fixture
def trend_records() -> list[TrendRecord]:
    return [
        TrendRecord(
            video_id="a",
            title="Older video",
            published_at="2026-01-01T00:00:00Z",
            view_count=1_000_000,
            like_count=50_000,
            comment_count=5_000,
        ),
        TrendRecord(
            video_id="b",
            title="Fresh video",
            published_at="2026-01-20T00:00:00Z",
            view_count=1_000_000,
            like_count=50_000,
            comment_count=5_000,
        ),
    ]


@pytest.fixture
def mock_orchestrator(sample_artifact: ContentArtifact) -> MagicMock:
    """Orchestrator double with async provider methods."""
    orchestrator = MagicMock()
    orchestrator.generate_complete_content = AsyncMock(return_value=sample_artifact)
    orchestrator.publish_content = AsyncMock(return_value=[])
    orchestrator.drain_background_tasks = AsyncMock()
    orchestrator.trend_service.discover_youtube_trends = AsyncMock(return_value=[])
    orchestrator.trend_service.search_trending_keywords = AsyncMock(return_value=[])
    orchestrator.trend_service.get_trending_topics_for_niche = AsyncMock(return_value=[])
    orchestrator.script_generator.generate_video_script = AsyncMock()
    orchestrator.script_generator.generate_voiceover_text = AsyncMock()
    orchestrator.script_generator.generate_script_variations = AsyncMock(return_value=[])
    return orchestrator


@pytest.fixture
def job_scheduler(mock_orchestrator: MagicMock):
    """Scheduler wired to the mock orchestrator; never started."""
    from reelforge.core.scheduler import JobScheduler

    return JobScheduler(orchestrator=mock_orchestrator)


@pytest_asyncio.fixture
async def client(mock_orchestrator: MagicMock, job_scheduler) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client with the orchestrator and scheduler overridden."""
    from reelforge.core.rate_limit import limiter
    from reelforge.dependencies import get_orchestrator, get_scheduler
    from reelforge.main import app

    app.dependency_overrides[get_orchestrator] = lambda: mock_orchestrator
    app.dependency_overrides[get_scheduler] = lambda: job_scheduler

    # Reset rate limiter storage before each test
    limiter.reset()

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def fake_llm():
    """Factory for fake text generators: fake_llm("a", "b") answers "a" then "b"."""
    return make_llm
