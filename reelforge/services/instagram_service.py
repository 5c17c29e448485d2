"""
Instagram service for publishing posts via the Instagram Graph API.

Publishing is two calls: create a media container from a public image URL,
then publish that container. Media must be hosted at a public URL.

API Docs: https://developers.facebook.com/docs/instagram-api/guides/content-publishing
"""

import httpx

from reelforge.config import get_settings
from reelforge.core.exceptions import UpstreamError
from reelforge.core.http import make_request
from reelforge.core.logging import get_logger
from reelforge.core.text_utils import truncate_text
from reelforge.schemas.platforms import InstagramPayload, PublishOutcome

logger = get_logger(__name__)

GRAPH_API_BASE = "https://graph.facebook.com/v18.0"
MAX_CAPTION_LENGTH = 2200


def build_caption(payload: InstagramPayload) -> str:
    """Caption plus hashtags, capped at Instagram's caption limit."""
    return truncate_text(f"{payload.caption}\n\n{' '.join(payload.hashtags)}", MAX_CAPTION_LENGTH)


async def post_to_instagram(
    payload: InstagramPayload,
    media_url: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> PublishOutcome:
    """
    Publish an image post to the configured business account.

    Raises:
        UpstreamError: If credentials or media are missing or the API fails
    """
    settings = get_settings()
    if not settings.instagram_access_token:
        raise UpstreamError("Instagram access token not configured")
    if not media_url:
        raise UpstreamError("Instagram requires a media_url")

    account_id = settings.instagram_business_account_id
    access_token = settings.instagram_access_token
    logger.bind(caption=truncate_text(payload.caption, 50)).info("posting_to_instagram")

    container = await make_request(
        "POST",
        f"{GRAPH_API_BASE}/{account_id}/media",
        json={
            "image_url": media_url,
            "caption": build_caption(payload),
            "access_token": access_token,
        },
        client=client,
    )
    creation_id = container.get("id")
    if not creation_id:
        raise UpstreamError("Instagram did not return a media container id")

    published = await make_request(
        "POST",
        f"{GRAPH_API_BASE}/{account_id}/media_publish",
        json={"creation_id": creation_id, "access_token": access_token},
        client=client,
    )
    post_id = published.get("id")

    logger.bind(post_id=post_id).info("instagram_post_published")
    return PublishOutcome(
        platform="instagram",
        success=True,
        post_id=post_id,
        url=f"https://www.instagram.com/p/{post_id}/",
    )
