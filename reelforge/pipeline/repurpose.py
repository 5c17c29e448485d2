"""
Platform repurposers.

Each transform is pure: it reads the artifact and returns a new payload.
Text is truncated with a trailing "..." when it exceeds the platform limit.

| Platform  | Text source                              | Max  | Hashtags | Aspect |
|-----------|------------------------------------------|------|----------|--------|
| instagram | first description line + 10 hashtags     | 2200 | 30       | 9:16   |
| tiktok    | SEO title, else topic                    | 150  | 10       | 9:16   |
| facebook  | full description, else topic             | 5000 | 15       | 1:1    |
| linkedin  | title + first 3 description lines        | 3000 | 5        | -      |
"""

from reelforge.core.text_utils import truncate_text
from reelforge.schemas.content import ContentArtifact
from reelforge.schemas.platforms import (
    FacebookPayload,
    InstagramPayload,
    LinkedInPayload,
    TikTokPayload,
)

INSTAGRAM_MAX_CAPTION = 2200
INSTAGRAM_MAX_HASHTAGS = 30
INSTAGRAM_CAPTION_HASHTAGS = 10
TIKTOK_MAX_CAPTION = 150
TIKTOK_MAX_HASHTAGS = 10
FACEBOOK_MAX_MESSAGE = 5000
FACEBOOK_MAX_HASHTAGS = 15
LINKEDIN_MAX_TEXT = 3000
LINKEDIN_MAX_HASHTAGS = 5
LINKEDIN_DESCRIPTION_LINES = 3

# Reels and TikTok clip length, seconds
SHORT_FORM_DURATION = 60


def _seo_fields(artifact: ContentArtifact) -> tuple[str, str, list[str]]:
    seo = artifact.seo_metadata
    if seo is None:
        return "", "", []
    return seo.title, seo.description, list(seo.hashtags)


def repurpose_for_instagram(artifact: ContentArtifact) -> InstagramPayload:
    _, description, hashtags = _seo_fields(artifact)
    first_line = description.split("\n")[0]
    caption = f"{first_line}\n\n{' '.join(hashtags[:INSTAGRAM_CAPTION_HASHTAGS])}"
    return InstagramPayload(
        caption=truncate_text(caption, INSTAGRAM_MAX_CAPTION),
        hashtags=hashtags[:INSTAGRAM_MAX_HASHTAGS],
        aspect_ratio="9:16",
        duration=SHORT_FORM_DURATION,
        visual_style="vertical",
    )


def repurpose_for_tiktok(artifact: ContentArtifact) -> TikTokPayload:
    title, _, hashtags = _seo_fields(artifact)
    caption = title or artifact.topic or "Video"
    return TikTokPayload(
        caption=truncate_text(caption, TIKTOK_MAX_CAPTION),
        hashtags=hashtags[:TIKTOK_MAX_HASHTAGS],
        aspect_ratio="9:16",
        duration=SHORT_FORM_DURATION,
        visual_style="vertical-dynamic",
    )


def repurpose_for_facebook(artifact: ContentArtifact) -> FacebookPayload:
    _, description, hashtags = _seo_fields(artifact)
    message = description or artifact.topic or ""
    return FacebookPayload(
        message=truncate_text(message, FACEBOOK_MAX_MESSAGE),
        hashtags=hashtags[:FACEBOOK_MAX_HASHTAGS],
        aspect_ratio="1:1",
        visual_style="square",
    )


def repurpose_for_linkedin(artifact: ContentArtifact) -> LinkedInPayload:
    title, description, hashtags = _seo_fields(artifact)
    title = title or artifact.topic or "Professional Content"
    lines = "\n".join(description.split("\n")[:LINKEDIN_DESCRIPTION_LINES])
    return LinkedInPayload(
        text=truncate_text(f"{title}\n\n{lines}", LINKEDIN_MAX_TEXT),
        hashtags=hashtags[:LINKEDIN_MAX_HASHTAGS],
        visual_style="professional",
    )
