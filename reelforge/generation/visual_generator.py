"""Scene, thumbnail and B-roll prompt generation for faceless videos."""

from reelforge.config import get_config
from reelforge.core.exceptions import UpstreamError
from reelforge.core.logging import get_logger
from reelforge.generation.llm import TextGenerator
from reelforge.generation.parsers import parse_bullet_list, parse_visual_prompts
from reelforge.schemas.content import GenerationMetadata, ThumbnailConcepts, VisualPrompts

logger = get_logger(__name__)

VISUAL_SYSTEM_PROMPT = (
    "You are an expert at creating detailed visual prompts for faceless video content, "
    "including stock footage suggestions, animations, and text overlays."
)
THUMBNAIL_SYSTEM_PROMPT = "You are an expert at creating high-CTR YouTube thumbnail concepts."
BROLL_SYSTEM_PROMPT = "You are an expert video editor suggesting B-roll footage."


def build_visual_prompt_request(script: str, style: str, scene_count: int, aspect_ratio: str) -> str:
    return f"""Generate {scene_count} detailed visual scene descriptions for a faceless YouTube video based on this script:

{script}

Requirements:
- Style: {style}
- Aspect ratio: {aspect_ratio}
- Each scene should describe:
  1. Visual elements (stock footage, graphics, animations)
  2. Text overlays and their positioning
  3. Color scheme and mood
  4. Transitions and effects
  5. Duration suggestion

Format each scene as:
SCENE [number]:
Visual: [description]
Text Overlay: [text and position]
Duration: [seconds]
Notes: [additional details]

Make it suitable for faceless content - no people on camera, focus on visuals, text, and graphics."""


class VisualGenerator:
    """Turns a script into scene descriptors, thumbnail ideas and B-roll terms."""

    def __init__(self, llm: TextGenerator | None = None):
        self.llm = llm or TextGenerator()

    async def generate_visual_prompts(
        self,
        script: str,
        style: str | None = None,
        scene_count: int | None = None,
        aspect_ratio: str = "16:9",
    ) -> VisualPrompts:
        """
        Generate per-scene visual prompts.

        Raises:
            UpstreamError: If the model call fails
        """
        pipeline = get_config().pipeline
        style = style or pipeline.visual_style
        scene_count = scene_count or pipeline.scene_count
        log = logger.bind(scene_count=scene_count, style=style)
        log.info("generating_visual_prompts")

        try:
            completion = await self.llm.complete(
                build_visual_prompt_request(script, style, scene_count, aspect_ratio),
                system=VISUAL_SYSTEM_PROMPT,
                temperature=0.7,
                max_tokens=1500,
            )
        except Exception as e:
            log.bind(error=str(e)).error("visual_prompts_generation_error")
            raise UpstreamError(f"Visual prompt generation failed: {e}") from e

        scenes = parse_visual_prompts(completion.text)
        log.bind(count=len(scenes)).info("visual_prompts_generated")

        return VisualPrompts(
            prompts=scenes,
            style=style,
            aspect_ratio=aspect_ratio,
            metadata=GenerationMetadata(model=completion.model, tokens=completion.total_tokens),
        )

    async def generate_thumbnail_prompts(
        self,
        title: str,
        count: int | None = None,
        style: str = "eye-catching",
    ) -> ThumbnailConcepts:
        """Generate free-text thumbnail concepts for a video title."""
        count = count or get_config().pipeline.thumbnail_count
        logger.bind(title=title[:50], count=count).info("generating_thumbnail_prompts")

        prompt = f"""Create {count} compelling YouTube thumbnail concepts for a video titled: "{title}"

For each thumbnail, describe:
1. Main visual element
2. Text to include
3. Color scheme
4. Emotional appeal
5. Why it will get clicks

Make them {style} and optimized for YouTube's algorithm."""

        try:
            completion = await self.llm.complete(
                prompt, system=THUMBNAIL_SYSTEM_PROMPT, temperature=0.8, max_tokens=1000
            )
        except Exception as e:
            logger.bind(error=str(e)).error("thumbnail_prompts_generation_error")
            raise UpstreamError(f"Thumbnail generation failed: {e}") from e

        return ThumbnailConcepts(thumbnail_concepts=completion.text, title=title, count=count)

    async def generate_broll_suggestions(self, script: str) -> list[str]:
        """Suggest stock footage search terms, one per line of model output."""
        logger.info("generating_broll_suggestions")
        prompt = (
            "Based on this video script, suggest specific B-roll footage to enhance the video:"
            f"\n\n{script}\n\n"
            "List 10-15 specific stock footage search terms or visual elements that would "
            "work well. Format as a simple list."
        )

        try:
            completion = await self.llm.complete(
                prompt, system=BROLL_SYSTEM_PROMPT, temperature=0.6, max_tokens=500
            )
        except Exception as e:
            logger.bind(error=str(e)).error("broll_suggestions_generation_error")
            raise UpstreamError(f"B-roll suggestion generation failed: {e}") from e

        suggestions = parse_bullet_list(completion.text)
        logger.bind(count=len(suggestions)).info("broll_suggestions_generated")
        return suggestions
