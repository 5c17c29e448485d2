"""Outbound "content ready" notifications (n8n, Zapier, ...)."""

from typing import Any

import httpx

from reelforge.core.datetime_utils import isoformat_z
from reelforge.core.http import make_request
from reelforge.core.logging import get_logger
from reelforge.schemas.content import ContentArtifact

logger = get_logger(__name__)

CONTENT_READY_EVENT = "content-ready"


def build_content_ready_payload(artifact: ContentArtifact) -> dict[str, Any]:
    """Summary of a finished artifact for downstream automations."""
    seo = artifact.seo_metadata
    return {
        "event": CONTENT_READY_EVENT,
        "content": {
            "id": artifact.id,
            "topic": artifact.topic,
            "niche": artifact.niche,
            "title": seo.title if seo else None,
            "description": seo.description if seo else None,
            "voiceover": artifact.voiceover.model_dump() if artifact.voiceover else None,
            "created_at": isoformat_z(artifact.metadata.created_at),
        },
    }


async def send_webhook(
    url: str,
    artifact: ContentArtifact,
    client: httpx.AsyncClient | None = None,
) -> None:
    """
    POST the content-ready payload to url.

    Raises:
        UpstreamError: If delivery fails after retries
    """
    await make_request("POST", url, json=build_content_ready_payload(artifact), client=client)
    logger.bind(content_id=artifact.id).info("webhook_sent")
