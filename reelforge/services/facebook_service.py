"""Facebook Page publishing via the Graph API."""

import httpx

from reelforge.config import get_settings
from reelforge.core.exceptions import UpstreamError
from reelforge.core.http import make_request
from reelforge.core.logging import get_logger
from reelforge.core.text_utils import truncate_text
from reelforge.schemas.platforms import FacebookPayload, PublishOutcome

logger = get_logger(__name__)

GRAPH_API_BASE = "https://graph.facebook.com/v18.0"


async def post_to_facebook(
    payload: FacebookPayload,
    media_url: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> PublishOutcome:
    """
    Post to the configured Page feed, or as a photo when media_url is given.

    Raises:
        UpstreamError: If the token is missing or the API fails
    """
    settings = get_settings()
    if not settings.facebook_access_token:
        raise UpstreamError("Facebook access token not configured")

    logger.bind(message=truncate_text(payload.message, 50)).info("posting_to_facebook")

    full_message = f"{payload.message}\n\n{' '.join(payload.hashtags)}"
    page_id = settings.facebook_page_id
    body = {"message": full_message, "access_token": settings.facebook_access_token}
    endpoint = f"{GRAPH_API_BASE}/{page_id}/feed"
    if media_url:
        endpoint = f"{GRAPH_API_BASE}/{page_id}/photos"
        body["url"] = media_url
        body["caption"] = full_message

    data = await make_request("POST", endpoint, json=body, client=client)
    post_id = data.get("id")

    logger.bind(post_id=post_id).info("facebook_post_published")
    return PublishOutcome(
        platform="facebook",
        success=True,
        post_id=post_id,
        url=f"https://www.facebook.com/{post_id}",
    )
