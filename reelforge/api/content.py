"""Content generation, repurposing and publishing endpoints."""

from fastapi import APIRouter, status

from reelforge.core.exceptions import ValidationError
from reelforge.core.logging import get_logger
from reelforge.dependencies import Orchestrator
from reelforge.schemas.api import (
    GenerateContentRequest,
    PublishRequest,
    RepurposeRequest,
    SuccessResponse,
)
from reelforge.schemas.content import ContentArtifact
from reelforge.schemas.platforms import PlatformPayload, PublishOutcome

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/content/generate",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponse[ContentArtifact],
)
async def generate_content(
    body: GenerateContentRequest, orchestrator: Orchestrator
) -> SuccessResponse[ContentArtifact]:
    """Run the full pipeline and return the assembled artifact."""
    logger.bind(topic=body.topic, niche=body.niche).info("api_content_generation_requested")
    artifact = await orchestrator.generate_complete_content(
        topic=body.topic,
        niche=body.niche,
        duration=body.duration,
        auto_discover_trend=body.auto_discover_trend,
        platforms=body.platforms,
    )
    return SuccessResponse(data=artifact)


@router.post("/content/repurpose")
async def repurpose_content(body: RepurposeRequest, orchestrator: Orchestrator) -> dict:
    """Shape an artifact for each requested platform."""
    if body.content is None or body.platforms is None:
        raise ValidationError("Content and platforms are required")

    logger.bind(platforms=body.platforms).info("api_content_repurposing_requested")
    repurposed: dict[str, PlatformPayload] = orchestrator.repurpose_content(
        body.content, body.platforms
    )
    return {
        "status": "success",
        "data": {name: payload.model_dump(mode="json") for name, payload in repurposed.items()},
    }


@router.post("/content/publish", response_model=SuccessResponse[list[PublishOutcome]])
async def publish_content(
    body: PublishRequest, orchestrator: Orchestrator
) -> SuccessResponse[list[PublishOutcome]]:
    """Publish an artifact; per-platform failures are reported in the outcome list."""
    if body.content is None or body.platforms is None:
        raise ValidationError("Content and platforms are required")

    logger.bind(platforms=body.platforms).info("api_content_publishing_requested")
    outcomes = await orchestrator.publish_content(
        body.content, body.platforms, media_url=body.media_url
    )
    return SuccessResponse(data=outcomes)
