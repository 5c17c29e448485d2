"""Pydantic schemas for platform payloads and publish outcomes."""

from pydantic import BaseModel, Field


class PlatformPayload(BaseModel):
    """Fields shared by every platform payload."""

    hashtags: list[str] = Field(default_factory=list)
    aspect_ratio: str | None = None
    visual_style: str
    duration: int | None = None


class InstagramPayload(PlatformPayload):
    caption: str


class TikTokPayload(PlatformPayload):
    caption: str


class FacebookPayload(PlatformPayload):
    message: str


class LinkedInPayload(PlatformPayload):
    text: str


class PublishOutcome(BaseModel):
    """Result of publishing to a single platform."""

    platform: str
    success: bool
    post_id: str | None = None
    url: str | None = None
    error: str | None = None
