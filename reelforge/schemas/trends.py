"""Pydantic schemas for trend discovery."""

from typing import Any

from pydantic import BaseModel, Field


class TrendRecord(BaseModel):
    """One candidate video or topic, with raw metrics and derived ranking."""

    video_id: str | None = None
    title: str
    description: str = ""
    channel_title: str = ""
    published_at: str | None = None
    view_count: int = 0
    like_count: int = 0
    comment_count: int = 0
    duration: str | None = None
    tags: list[str] = Field(default_factory=list)
    category_id: str | None = None
    thumbnails: dict[str, Any] = Field(default_factory=dict)
    engagement_rate: float | None = None
    trend_score: float | None = None
