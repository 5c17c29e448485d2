from reelforge.schemas.content import (
    ContentArtifact,
    ContentMetadata,
    SEOMetadata,
    ThumbnailConcepts,
    VideoScript,
    VisualPrompts,
    VisualScene,
    VoiceoverAsset,
)
from reelforge.schemas.platforms import (
    FacebookPayload,
    InstagramPayload,
    LinkedInPayload,
    PlatformPayload,
    PublishOutcome,
    TikTokPayload,
)
from reelforge.schemas.trends import TrendRecord

__all__ = [
    "ContentArtifact",
    "ContentMetadata",
    "FacebookPayload",
    "InstagramPayload",
    "LinkedInPayload",
    "PlatformPayload",
    "PublishOutcome",
    "SEOMetadata",
    "ThumbnailConcepts",
    "TikTokPayload",
    "TrendRecord",
    "VideoScript",
    "VisualPrompts",
    "VisualScene",
    "VoiceoverAsset",
]
