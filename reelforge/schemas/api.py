"""Request and response bodies for the HTTP API."""

from typing import Any, Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from reelforge.schemas.content import ContentArtifact

T = TypeVar("T")


class RequestModel(BaseModel):
    """Request bodies accept both snake_case and camelCase field names."""

    model_config = ConfigDict(populate_by_name=True)


class GenerateContentRequest(RequestModel):
    topic: str | None = None
    niche: str | None = None
    duration: int | None = Field(default=None, gt=0)
    auto_discover_trend: bool = Field(
        default=True,
        validation_alias=AliasChoices("auto_discover_trend", "autoDiscoverTrend"),
    )
    platforms: list[str] | None = None


class RepurposeRequest(RequestModel):
    content: ContentArtifact | None = None
    platforms: list[str] | None = None


class PublishRequest(RepurposeRequest):
    media_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("media_url", "mediaUrl"),
    )


class ScriptRequest(RequestModel):
    topic: str | None = None
    duration: int = Field(default=120, gt=0)
    tone: str = "engaging"
    target_audience: str | None = Field(
        default=None,
        validation_alias=AliasChoices("target_audience", "targetAudience"),
    )


class VoiceoverRequest(RequestModel):
    script: str | None = None


class VariationsRequest(RequestModel):
    topic: str | None = None
    count: int = Field(default=3, ge=1, le=10)


class SuccessResponse(BaseModel, Generic[T]):
    """Standard success envelope."""

    status: str = "success"
    data: T


class ListResponse(BaseModel, Generic[T]):
    """Success envelope for list endpoints."""

    status: str = "success"
    count: int
    data: list[T]


class MessageResponse(BaseModel):
    status: str = "success"
    message: str
    data: Any = None
