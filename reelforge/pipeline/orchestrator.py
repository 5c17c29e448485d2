"""
Content pipeline orchestrator.

Runs the generation steps in a fixed order and assembles one ContentArtifact:

1. Topic (given, or discovered for the niche)
2. Script
3. Voiceover text, then audio
4. Visual scene prompts
5. Thumbnail concepts
6. SEO metadata
7. B-roll suggestions

Steps run strictly one after another. The first failure aborts the run and
propagates; nothing partial is returned.
"""

import asyncio
from collections.abc import Awaitable, Callable

from reelforge.config import get_config, get_settings
from reelforge.core.exceptions import MissingTopicError
from reelforge.core.logging import get_logger
from reelforge.core.text_utils import generate_id
from reelforge.generation.llm import TextGenerator
from reelforge.generation.script_generator import ScriptGenerator
from reelforge.generation.seo_metadata import SEOMetadataGenerator
from reelforge.generation.visual_generator import VisualGenerator
from reelforge.generation.voiceover import VoiceoverService
from reelforge.pipeline.platforms import PlatformRegistry, get_registry
from reelforge.schemas.content import ContentArtifact, ContentMetadata
from reelforge.schemas.platforms import PlatformPayload, PublishOutcome
from reelforge.services.webhook_service import send_webhook
from reelforge.trends.discovery import TrendDiscoveryService

logger = get_logger(__name__)

WebhookSender = Callable[[str, ContentArtifact], Awaitable[None]]


class ContentOrchestrator:
    """Sequences the generation providers and fans artifacts out to platforms."""

    def __init__(
        self,
        script_generator: ScriptGenerator | None = None,
        voiceover_service: VoiceoverService | None = None,
        visual_generator: VisualGenerator | None = None,
        seo_generator: SEOMetadataGenerator | None = None,
        trend_service: TrendDiscoveryService | None = None,
        registry: PlatformRegistry | None = None,
        webhook_sender: WebhookSender | None = None,
    ):
        llm = TextGenerator() if not (script_generator and visual_generator and seo_generator) else None
        self.script_generator = script_generator or ScriptGenerator(llm)
        self.voiceover_service = voiceover_service or VoiceoverService()
        self.visual_generator = visual_generator or VisualGenerator(llm)
        self.seo_generator = seo_generator or SEOMetadataGenerator(llm)
        self.trend_service = trend_service or TrendDiscoveryService()
        self.registry = registry or get_registry()
        self.webhook_sender = webhook_sender or send_webhook
        self._background_tasks: set[asyncio.Task] = set()

    async def _resolve_topic(self, topic: str | None, niche: str, auto_discover_trend: bool) -> str:
        if topic:
            return topic
        if auto_discover_trend:
            logger.bind(niche=niche).info("discovering_topic")
            trends = await self.trend_service.get_trending_topics_for_niche(niche)
            topic = trends[0].title if trends and trends[0].title else f"Trending {niche} topic"
            logger.bind(topic=topic).info("topic_discovered")
            return topic
        raise MissingTopicError()

    async def generate_complete_content(
        self,
        topic: str | None = None,
        niche: str | None = None,
        duration: int | None = None,
        auto_discover_trend: bool = True,
        platforms: list[str] | None = None,
    ) -> ContentArtifact:
        """
        Run the full pipeline once.

        Args:
            topic: Video topic; discovered when omitted and auto_discover_trend is set
            niche: Content niche (defaults to settings)
            duration: Target length in seconds
            auto_discover_trend: Discover a topic when none is given
            platforms: Intended target platforms, recorded on the artifact

        Returns:
            Fully populated ContentArtifact

        Raises:
            MissingTopicError: No topic given and discovery disabled
            UpstreamError: A generation step failed
        """
        settings = get_settings()
        pipeline = get_config().pipeline
        niche = niche or settings.content_niche
        duration = duration or pipeline.default_duration
        platforms = platforms or list(pipeline.default_platforms)

        topic = await self._resolve_topic(topic, niche, auto_discover_trend)
        content_id = generate_id()
        log = logger.bind(content_id=content_id, topic=topic[:50], niche=niche)
        log.info("content_generation_started")

        try:
            script = await self.script_generator.generate_video_script(
                topic=topic,
                duration=duration,
                tone=pipeline.script_tone,
                target_audience=settings.target_audience,
            )

            voiceover_text = await self.script_generator.generate_voiceover_text(script.full_script)
            voiceover = await self.voiceover_service.generate_voiceover(
                voiceover_text, filename=f"{content_id}_voiceover.mp3"
            )

            visuals = await self.visual_generator.generate_visual_prompts(
                script.full_script,
                style=pipeline.visual_style,
                scene_count=pipeline.scene_count,
            )
            thumbnails = await self.visual_generator.generate_thumbnail_prompts(
                topic, count=pipeline.thumbnail_count
            )
            seo_metadata = await self.seo_generator.generate_seo_metadata(
                script.full_script, niche=niche
            )
            broll = await self.visual_generator.generate_broll_suggestions(script.full_script)
        except Exception as e:
            log.bind(error=str(e)).error("content_generation_failed")
            raise

        artifact = ContentArtifact(
            id=content_id,
            topic=topic,
            niche=niche,
            script=script,
            voiceover=voiceover,
            visuals=visuals,
            thumbnails=thumbnails,
            seo_metadata=seo_metadata,
            broll_suggestions=broll,
            metadata=ContentMetadata(duration=duration, platforms=platforms),
        )
        log.info("content_generation_complete")

        self._notify_webhook(artifact)
        return artifact

    def _notify_webhook(self, artifact: ContentArtifact) -> None:
        settings = get_settings()
        if not (settings.webhook_enabled and settings.webhook_url):
            return
        task = asyncio.create_task(self._send_webhook(settings.webhook_url, artifact))
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)

    async def _send_webhook(self, url: str, artifact: ContentArtifact) -> None:
        try:
            await self.webhook_sender(url, artifact)
        except Exception as e:
            logger.bind(content_id=artifact.id, error=str(e)).warning("webhook_notification_failed")

    async def drain_background_tasks(self) -> None:
        """Wait for pending webhook notifications."""
        if self._background_tasks:
            await asyncio.gather(*self._background_tasks, return_exceptions=True)

    def repurpose_content(
        self, artifact: ContentArtifact, platforms: list[str]
    ) -> dict[str, PlatformPayload]:
        """
        Shape an artifact for each requested platform.

        Unknown platforms are skipped. Keys follow request order; duplicates
        collapse into one entry.
        """
        repurposed: dict[str, PlatformPayload] = {}
        for name in platforms:
            capability = self.registry.get(name)
            if capability is None or name in repurposed:
                continue
            repurposed[name] = capability.repurpose(artifact)

        logger.bind(content_id=artifact.id, platforms=list(repurposed)).info("content_repurposed")
        return repurposed

    async def _publish_one(
        self, name: str, payload: PlatformPayload, media_url: str | None
    ) -> PublishOutcome:
        capability = self.registry.get(name)
        try:
            return await capability.publish(payload, media_url=media_url)
        except Exception as e:
            logger.bind(platform=name, error=str(e)).error("platform_publish_failed")
            return PublishOutcome(platform=name, success=False, error=str(e))

    async def publish_content(
        self,
        artifact: ContentArtifact,
        platforms: list[str],
        media_url: str | None = None,
    ) -> list[PublishOutcome]:
        """
        Repurpose and post to every requested platform concurrently.

        A platform failure becomes a failed outcome; it never affects the
        others. Outcomes follow the platform list order.
        """
        repurposed = self.repurpose_content(artifact, platforms)
        outcomes = await asyncio.gather(
            *(self._publish_one(name, payload, media_url) for name, payload in repurposed.items())
        )

        logger.bind(
            content_id=artifact.id,
            successful=sum(1 for o in outcomes if o.success),
            failed=sum(1 for o in outcomes if not o.success),
        ).info("content_published")
        return list(outcomes)
