"""Tests for SEO metadata generation."""

from unittest.mock import AsyncMock

import pytest

from reelforge.core.exceptions import UpstreamError
from reelforge.generation.llm import Completion
from reelforge.generation.seo_metadata import MAX_TAGS, SEOMetadataGenerator, suggest_category

pytestmark = pytest.mark.asyncio

TITLES = "1. Your Phone vs Apollo 11\n2. 4KB That Reached the Moon\n3. Tiny Computer, Giant Leap"
DESCRIPTION = "  The Apollo guidance computer had 4KB of RAM.  "
TAGS = "apollo, nasa, apollo, smartphones"
HASHTAGS = "#tech #nasa #space"
KEYWORDS = "apollo guidance computer, moon landing"
CHAPTERS = "0:00 - Introduction\n0:30 - The Apollo Computer\nThanks for watching"


class TestSuggestCategory:
    async def test_known_niche(self):
        assert suggest_category("technology") == "Science & Technology"
        assert suggest_category("Gaming") == "Gaming"

    async def test_unknown_niche_defaults_to_education(self):
        assert suggest_category("knitting") == "Education"


class TestGenerateSeoMetadata:
    """Tests for SEOMetadataGenerator.generate_seo_metadata."""

    async def test_full_youtube_metadata(self, fake_llm):
        llm = fake_llm(TITLES, DESCRIPTION, TAGS, HASHTAGS, KEYWORDS, CHAPTERS)

        metadata = await SEOMetadataGenerator(llm=llm).generate_seo_metadata(
            "script", niche="technology"
        )

        assert metadata.title == "Your Phone vs Apollo 11"
        assert metadata.description == "The Apollo guidance computer had 4KB of RAM."
        assert metadata.tags == ["apollo", "nasa", "smartphones"]
        assert metadata.hashtags == ["#tech", "#nasa", "#space"]
        assert metadata.category == "Science & Technology"
        assert metadata.keywords == ["apollo guidance computer", "moon landing"]
        assert metadata.chapters == ["0:00 - Introduction", "0:30 - The Apollo Computer"]

    async def test_target_keywords_skip_extraction(self, fake_llm):
        llm = fake_llm(TITLES, DESCRIPTION, TAGS, HASHTAGS)

        metadata = await SEOMetadataGenerator(llm=llm).generate_seo_metadata(
            "script", niche="finance", target_keywords=["budgeting"], platform="instagram"
        )

        assert metadata.keywords == ["budgeting"]
        assert metadata.chapters is None
        assert llm.complete.await_count == 4
        description_prompt = llm.complete.await_args_list[1].args[0]
        assert "Target keywords: budgeting" in description_prompt

    async def test_empty_titles_fall_back(self, fake_llm):
        llm = fake_llm("", DESCRIPTION, TAGS, HASHTAGS, KEYWORDS)
        metadata = await SEOMetadataGenerator(llm=llm).generate_seo_metadata(
            "script", platform="tiktok"
        )
        assert metadata.title == "Untitled Video"

    async def test_title_failure_propagates(self, fake_llm):
        llm = fake_llm("")
        llm.complete.side_effect = RuntimeError("model offline")

        with pytest.raises(UpstreamError, match="SEO metadata generation failed: model offline"):
            await SEOMetadataGenerator(llm=llm).generate_seo_metadata("script")

    async def test_optional_fields_degrade_to_empty(self, fake_llm):
        def _completion(text):
            return Completion(text=text, model="gpt-4o", total_tokens=1)

        llm = fake_llm("")
        llm.complete = AsyncMock(
            side_effect=[
                _completion(TITLES),
                _completion(DESCRIPTION),
                RuntimeError("tags"),
                RuntimeError("hashtags"),
                RuntimeError("keywords"),
                RuntimeError("chapters"),
            ]
        )

        metadata = await SEOMetadataGenerator(llm=llm).generate_seo_metadata("script")

        assert metadata.title == "Your Phone vs Apollo 11"
        assert metadata.tags == []
        assert metadata.hashtags == []
        assert metadata.keywords == []
        assert metadata.chapters == []

    async def test_tags_are_capped(self, fake_llm):
        many_tags = ", ".join(f"tag{i}" for i in range(30))
        llm = fake_llm(TITLES, DESCRIPTION, many_tags, HASHTAGS, KEYWORDS)

        metadata = await SEOMetadataGenerator(llm=llm).generate_seo_metadata(
            "script", platform="facebook"
        )

        assert len(metadata.tags) == MAX_TAGS
