"""Pydantic schemas for generated content."""

from datetime import datetime
from typing import Literal

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from reelforge.core.datetime_utils import utc_now


class ContentModel(BaseModel):
    """Accepts snake_case or camelCase keys on input; always dumps snake_case."""

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=AliasGenerator(
            validation_alias=lambda name: AliasChoices(name, to_camel(name)),
        ),
    )


# -----------------------------------------------------------------------------
# Script
# -----------------------------------------------------------------------------


class GenerationMetadata(ContentModel):
    """Bookkeeping attached to each LLM-generated section."""

    generated_at: datetime = Field(default_factory=utc_now)
    model: str = ""
    tokens: int | None = None


class ParsedScript(ContentModel):
    """Sections extracted from free-text script output."""

    hook: str = ""
    main_content: list[str] = Field(default_factory=list)
    call_to_action: str = ""
    full_script: str = ""


class VideoScript(ParsedScript):
    """Script for a short-form video."""

    topic: str
    duration: int
    tone: str = "engaging"
    metadata: GenerationMetadata = Field(default_factory=GenerationMetadata)


# -----------------------------------------------------------------------------
# Voiceover
# -----------------------------------------------------------------------------


class VoiceoverAsset(ContentModel):
    """Reference to a synthesized audio file."""

    path: str
    filename: str
    size: int = Field(ge=0, description="File size in bytes")
    provider: Literal["openai", "elevenlabs"]
    voice: str | None = None
    model: str | None = None


# -----------------------------------------------------------------------------
# Visuals
# -----------------------------------------------------------------------------


class VisualScene(ContentModel):
    """A single scene descriptor."""

    visual: str = ""
    text_overlay: str = ""
    duration: int = 10
    notes: str = ""
    color_scheme: str = ""
    transition: str = ""


class VisualPrompts(ContentModel):
    """Ordered scene prompts for the whole video."""

    prompts: list[VisualScene] = Field(default_factory=list)
    style: str = "modern"
    aspect_ratio: str = "16:9"
    metadata: GenerationMetadata = Field(default_factory=GenerationMetadata)


class ThumbnailConcepts(ContentModel):
    """Free-text thumbnail concept descriptions."""

    thumbnail_concepts: str
    title: str
    count: int = 3


# -----------------------------------------------------------------------------
# SEO
# -----------------------------------------------------------------------------


class SEOMetadata(ContentModel):
    """Search and discovery metadata."""

    title: str = "Untitled Video"
    description: str = ""
    tags: list[str] = Field(default_factory=list, description="Order-insignificant, unique")
    hashtags: list[str] = Field(default_factory=list)
    category: str = "Education"
    keywords: list[str] = Field(default_factory=list)
    chapters: list[str] | None = None

    @field_validator("tags")
    @classmethod
    def _unique_tags(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(tag for tag in value if tag))

    @field_validator("hashtags")
    @classmethod
    def _prefixed_hashtags(cls, value: list[str]) -> list[str]:
        return [tag if tag.startswith("#") else f"#{tag}" for tag in value if tag]


# -----------------------------------------------------------------------------
# Artifact
# -----------------------------------------------------------------------------


class ContentMetadata(ContentModel):
    """Lifecycle information for an artifact."""

    created_at: datetime = Field(default_factory=utc_now)
    duration: int = 120
    platforms: list[str] = Field(default_factory=lambda: ["youtube"])
    status: Literal["generated"] = "generated"


class ContentArtifact(ContentModel):
    """
    The unit produced by one pipeline run.

    id and topic are fixed at creation; every other field is filled in by a
    pipeline step and never cleared.
    """

    id: str = Field(frozen=True)
    topic: str = Field(frozen=True, min_length=1)
    niche: str = "technology"
    script: VideoScript | None = None
    voiceover: VoiceoverAsset | None = None
    visuals: VisualPrompts | None = None
    thumbnails: ThumbnailConcepts | None = None
    seo_metadata: SEOMetadata | None = None
    broll_suggestions: list[str] = Field(default_factory=list)
    metadata: ContentMetadata = Field(default_factory=ContentMetadata)
