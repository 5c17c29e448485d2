"""SEO metadata generation: title, description, tags, hashtags, keywords, chapters."""

from reelforge.config import get_settings
from reelforge.core.exceptions import UpstreamError
from reelforge.core.logging import get_logger
from reelforge.core.text_utils import truncate_text
from reelforge.generation.llm import TextGenerator
from reelforge.generation.parsers import (
    parse_chapters,
    parse_comma_list,
    parse_hashtags,
    parse_numbered_list,
)
from reelforge.schemas.content import SEOMetadata

logger = get_logger(__name__)

CATEGORY_MAP = {
    "technology": "Science & Technology",
    "finance": "Education",
    "health": "Howto & Style",
    "entertainment": "Entertainment",
    "education": "Education",
    "gaming": "Gaming",
    "music": "Music",
}
DEFAULT_CATEGORY = "Education"

MAX_TAGS = 20


def suggest_category(niche: str) -> str:
    """Map a niche to a YouTube category name."""
    return CATEGORY_MAP.get(niche.lower(), DEFAULT_CATEGORY)


class SEOMetadataGenerator:
    """
    Builds SEOMetadata from a script with one model call per field.

    Title and description are required and their failures propagate. Tags,
    hashtags, keywords and chapters degrade to empty lists.
    """

    def __init__(self, llm: TextGenerator | None = None):
        self.llm = llm or TextGenerator()

    async def generate_seo_metadata(
        self,
        script: str,
        niche: str | None = None,
        target_keywords: list[str] | None = None,
        platform: str = "youtube",
    ) -> SEOMetadata:
        """
        Generate metadata for a video.

        Args:
            script: Full script text
            niche: Content niche (defaults to settings)
            target_keywords: Keywords to use instead of extracting them
            platform: Chapters are only generated for "youtube"

        Raises:
            UpstreamError: If the title or description call fails
        """
        niche = niche or get_settings().content_niche
        target_keywords = target_keywords or []
        log = logger.bind(niche=niche, platform=platform)
        log.info("generating_seo_metadata")

        try:
            title = await self.generate_title(script, niche)
            description = await self.generate_description(script, niche, target_keywords)
        except Exception as e:
            log.bind(error=str(e)).error("seo_metadata_generation_error")
            raise UpstreamError(f"SEO metadata generation failed: {e}") from e

        metadata = SEOMetadata(
            title=title,
            description=description,
            tags=await self.generate_tags(script, niche),
            hashtags=await self.generate_hashtags(script, niche),
            category=suggest_category(niche),
            keywords=target_keywords or await self.extract_keywords(script),
        )
        if platform == "youtube":
            metadata.chapters = await self.generate_chapters(script)

        log.bind(tags=len(metadata.tags), hashtags=len(metadata.hashtags)).info(
            "seo_metadata_generated"
        )
        return metadata

    async def generate_title(self, script: str, niche: str) -> str:
        prompt = f"""Create 3 engaging, SEO-optimized YouTube video titles for this {niche} content:

{truncate_text(script, 500)}

Requirements:
- 60 characters or less
- Include keywords naturally
- Create curiosity or promise value
- Capitalize properly

Format: Just list the 3 titles, numbered."""

        completion = await self.llm.complete(
            prompt,
            system="You are a YouTube SEO expert specializing in viral titles.",
            temperature=0.8,
            max_tokens=200,
        )
        titles = parse_numbered_list(completion.text)
        return titles[0] if titles else "Untitled Video"

    async def generate_description(self, script: str, niche: str, keywords: list[str]) -> str:
        keyword_text = f"\nTarget keywords: {', '.join(keywords)}" if keywords else ""
        prompt = f"""Create a YouTube video description for this {niche} content:

{truncate_text(script, 500)}{keyword_text}

Include:
- Engaging opening (2-3 sentences)
- Key points covered
- Call to action
- Relevant keywords naturally integrated
- Timestamp suggestions

Keep it under 500 words."""

        completion = await self.llm.complete(
            prompt,
            system="You are a YouTube SEO expert creating optimized descriptions.",
            temperature=0.7,
            max_tokens=800,
        )
        return completion.text.strip()

    async def generate_tags(self, script: str, niche: str) -> list[str]:
        prompt = f"""Generate 15-20 relevant YouTube tags for this {niche} video:

{truncate_text(script, 300)}

Mix of:
- Specific tags (long-tail)
- Broad tags (competitive)
- Trending tags

Format: comma-separated list"""

        try:
            completion = await self.llm.complete(
                prompt,
                system="You are a YouTube SEO expert creating effective tags.",
                temperature=0.6,
                max_tokens=300,
            )
        except Exception as e:
            logger.bind(error=str(e)).warning("tags_generation_failed")
            return []
        return parse_comma_list(completion.text)[:MAX_TAGS]

    async def generate_hashtags(self, script: str, niche: str) -> list[str]:
        prompt = f"""Generate 5-10 trending hashtags for this {niche} video content:

{truncate_text(script, 200)}

Mix popular and niche-specific hashtags. Format: #hashtag"""

        try:
            completion = await self.llm.complete(
                prompt,
                system="You are a social media expert creating effective hashtags.",
                temperature=0.7,
                max_tokens=200,
            )
        except Exception as e:
            logger.bind(error=str(e)).warning("hashtags_generation_failed")
            return []
        return parse_hashtags(completion.text)

    async def extract_keywords(self, script: str) -> list[str]:
        prompt = f"""Extract 5-10 key SEO keywords/phrases from this content:

{truncate_text(script, 400)}

Format: comma-separated list of keywords"""

        try:
            completion = await self.llm.complete(
                prompt,
                system="You are an SEO expert extracting relevant keywords.",
                temperature=0.5,
                max_tokens=150,
            )
        except Exception as e:
            logger.bind(error=str(e)).warning("keywords_extraction_failed")
            return []
        return parse_comma_list(completion.text)

    async def generate_chapters(self, script: str) -> list[str]:
        prompt = f"""Create 4-6 video chapter titles with timestamps for this script:

{truncate_text(script, 600)}

Format:
0:00 - Introduction
0:15 - [Chapter title]
...

Keep it natural and descriptive."""

        try:
            completion = await self.llm.complete(
                prompt,
                system="You are a video editor creating chapter timestamps.",
                temperature=0.6,
                max_tokens=300,
            )
        except Exception as e:
            logger.bind(error=str(e)).warning("chapters_generation_failed")
            return []
        return parse_chapters(completion.text)
