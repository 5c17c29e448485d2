"""
TikTok service for sharing videos via the TikTok share API.

The video must be hosted at a public URL; TikTok pulls it from there.
"""

import httpx

from reelforge.config import get_config, get_settings
from reelforge.core.exceptions import UpstreamError
from reelforge.core.http import make_request
from reelforge.core.logging import get_logger
from reelforge.core.text_utils import truncate_text
from reelforge.schemas.platforms import PublishOutcome, TikTokPayload

logger = get_logger(__name__)

TIKTOK_UPLOAD_URL = "https://open-api.tiktok.com/share/video/upload/"
MAX_TITLE_LENGTH = 150


def build_post_info(payload: TikTokPayload) -> dict:
    tiktok = get_config().tiktok
    full_caption = f"{payload.caption} {' '.join(payload.hashtags)}"
    return {
        "title": truncate_text(full_caption, MAX_TITLE_LENGTH),
        "privacy_level": tiktok.privacy_level,
        "disable_duet": tiktok.disable_duet,
        "disable_comment": tiktok.disable_comment,
        "disable_stitch": tiktok.disable_stitch,
        "video_cover_timestamp_ms": tiktok.video_cover_timestamp_ms,
    }


async def post_to_tiktok(
    payload: TikTokPayload,
    media_url: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> PublishOutcome:
    """
    Share a video to TikTok.

    Raises:
        UpstreamError: If the token is missing or the API fails
    """
    settings = get_settings()
    if not settings.tiktok_access_token:
        raise UpstreamError("TikTok access token not configured")

    logger.bind(caption=truncate_text(payload.caption, 50)).info("posting_to_tiktok")

    data = await make_request(
        "POST",
        TIKTOK_UPLOAD_URL,
        json={"video": {"url": media_url}, "post_info": build_post_info(payload)},
        headers={"Authorization": f"Bearer {settings.tiktok_access_token}"},
        client=client,
    )
    share_id = (data.get("data") or {}).get("share_id")

    logger.bind(share_id=share_id).info("tiktok_video_shared")
    return PublishOutcome(platform="tiktok", success=True, post_id=share_id)
