"""LinkedIn publishing via the UGC Posts API."""

from typing import Any

import httpx

from reelforge.config import get_settings
from reelforge.core.exceptions import UpstreamError
from reelforge.core.http import make_request
from reelforge.core.logging import get_logger
from reelforge.core.text_utils import truncate_text
from reelforge.schemas.platforms import LinkedInPayload, PublishOutcome

logger = get_logger(__name__)

UGC_POSTS_URL = "https://api.linkedin.com/v2/ugcPosts"
MAX_TEXT_LENGTH = 3000


def build_ugc_post(payload: LinkedInPayload, author: str, media_url: str | None = None) -> dict:
    """Build a UGC post body for a public share."""
    full_text = f"{payload.text}\n\n{' '.join(payload.hashtags)}"
    share_content: dict[str, Any] = {
        "shareCommentary": {"text": truncate_text(full_text, MAX_TEXT_LENGTH)},
        "shareMediaCategory": "IMAGE" if media_url else "NONE",
    }
    if media_url:
        share_content["media"] = [{"status": "READY", "originalUrl": media_url}]

    return {
        "author": author,
        "lifecycleState": "PUBLISHED",
        "specificContent": {"com.linkedin.ugc.ShareContent": share_content},
        "visibility": {"com.linkedin.ugc.MemberNetworkVisibility": "PUBLIC"},
    }


async def post_to_linkedin(
    payload: LinkedInPayload,
    media_url: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> PublishOutcome:
    """
    Share a post as the configured member.

    Raises:
        UpstreamError: If the token is missing or the API fails
    """
    settings = get_settings()
    if not settings.linkedin_access_token:
        raise UpstreamError("LinkedIn access token not configured")

    logger.bind(text=truncate_text(payload.text, 50)).info("posting_to_linkedin")

    data = await make_request(
        "POST",
        UGC_POSTS_URL,
        json=build_ugc_post(payload, settings.linkedin_person_urn, media_url),
        headers={
            "Authorization": f"Bearer {settings.linkedin_access_token}",
            "X-Restli-Protocol-Version": "2.0.0",
        },
        client=client,
    )
    post_id = data.get("id")

    logger.bind(post_id=post_id).info("linkedin_post_published")
    return PublishOutcome(platform="linkedin", success=True, post_id=post_id)
