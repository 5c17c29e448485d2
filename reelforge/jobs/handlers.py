"""
Job bodies for the three scheduled jobs.

Each handler takes the orchestrator and the scheduler state, does one unit of
work, and returns its result. Failures propagate; the scheduler decides
whether to log or surface them.
"""

from reelforge.config import get_config, get_settings
from reelforge.core.logging import get_logger
from reelforge.jobs.state import SchedulerState
from reelforge.pipeline.orchestrator import ContentOrchestrator
from reelforge.schemas.content import ContentArtifact
from reelforge.schemas.platforms import PublishOutcome
from reelforge.schemas.trends import TrendRecord

logger = get_logger(__name__)


async def run_trend_discovery(
    orchestrator: ContentOrchestrator, state: SchedulerState
) -> list[TrendRecord]:
    """Refresh the cached trends for the configured niche."""
    niche = get_settings().content_niche
    trends = await orchestrator.trend_service.get_trending_topics_for_niche(niche)
    state.latest_trends = trends

    logger.bind(
        niche=niche,
        trend_count=len(trends),
        top_trend=trends[0].title if trends else None,
    ).info("trend_discovery_job_complete")
    return trends


async def run_content_generation(
    orchestrator: ContentOrchestrator, state: SchedulerState
) -> ContentArtifact:
    """Generate one artifact on a discovered topic and keep it for posting."""
    settings = get_settings()
    artifact = await orchestrator.generate_complete_content(
        niche=settings.content_niche,
        duration=settings.min_video_duration,
        auto_discover_trend=True,
    )
    state.record_content(artifact)

    logger.bind(content_id=artifact.id, topic=artifact.topic).info(
        "content_generation_job_complete"
    )
    return artifact


def get_posting_platforms() -> list[str]:
    """Posting platforms that have an access token configured."""
    settings = get_settings()
    return [p for p in get_config().posting.platforms if settings.platform_access_token(p)]


async def run_content_posting(
    orchestrator: ContentOrchestrator, state: SchedulerState
) -> list[PublishOutcome]:
    """Publish the most recent artifact to every configured platform."""
    artifact = state.latest_content
    if artifact is None:
        logger.warning("no_content_available_for_posting")
        return []

    platforms = get_posting_platforms()
    if not platforms:
        logger.warning("no_platforms_configured_for_posting")
        return []

    outcomes = await orchestrator.publish_content(artifact, platforms)
    logger.bind(
        content_id=artifact.id,
        platforms=platforms,
        successful=sum(1 for o in outcomes if o.success),
    ).info("content_posting_job_complete")
    return outcomes
