"""Script generation endpoints."""

from fastapi import APIRouter, status

from reelforge.core.exceptions import MissingTopicError, ValidationError
from reelforge.core.logging import get_logger
from reelforge.dependencies import Orchestrator
from reelforge.schemas.api import (
    ListResponse,
    ScriptRequest,
    SuccessResponse,
    VariationsRequest,
    VoiceoverRequest,
)
from reelforge.schemas.content import VideoScript

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "/script/generate",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponse[VideoScript],
)
async def generate_script(
    body: ScriptRequest, orchestrator: Orchestrator
) -> SuccessResponse[VideoScript]:
    if not body.topic:
        raise MissingTopicError("Topic is required")

    logger.bind(topic=body.topic, duration=body.duration).info("api_script_generation_requested")
    script = await orchestrator.script_generator.generate_video_script(
        topic=body.topic,
        duration=body.duration,
        tone=body.tone,
        target_audience=body.target_audience,
    )
    return SuccessResponse(data=script)


@router.post("/script/voiceover", response_model=SuccessResponse[dict[str, str]])
async def generate_voiceover_text(
    body: VoiceoverRequest, orchestrator: Orchestrator
) -> SuccessResponse[dict[str, str]]:
    if not body.script:
        raise ValidationError("Script is required")

    logger.info("api_voiceover_text_requested")
    text = await orchestrator.script_generator.generate_voiceover_text(body.script)
    return SuccessResponse(data={"voiceover_text": text})


@router.post("/script/variations", response_model=ListResponse[VideoScript])
async def generate_script_variations(
    body: VariationsRequest, orchestrator: Orchestrator
) -> ListResponse[VideoScript]:
    if not body.topic:
        raise MissingTopicError("Topic is required")

    logger.bind(topic=body.topic, count=body.count).info("api_script_variations_requested")
    variations = await orchestrator.script_generator.generate_script_variations(
        body.topic, body.count
    )
    return ListResponse(count=len(variations), data=variations)
