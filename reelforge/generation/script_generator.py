"""LLM-based video script generation."""

from reelforge.config import get_settings
from reelforge.core.exceptions import UpstreamError
from reelforge.core.logging import get_logger
from reelforge.generation.llm import TextGenerator
from reelforge.generation.parsers import parse_script
from reelforge.schemas.content import GenerationMetadata, VideoScript

logger = get_logger(__name__)

SCRIPT_SYSTEM_PROMPT = (
    "You are an expert YouTube script writer specializing in high-retention, "
    "engaging content for faceless videos."
)

VOICEOVER_SYSTEM_PROMPT = "You are an expert at preparing scripts for text-to-speech voiceover."

VARIATION_TONES = ["engaging", "educational", "entertaining", "inspiring", "conversational"]

# ~150 words per minute of narration
WORDS_PER_SECOND = 2.5


def build_script_prompt(
    topic: str,
    duration: int,
    tone: str,
    target_audience: str,
    include_hook: bool = True,
    include_call_to_action: bool = True,
) -> str:
    """Build the user prompt for script generation."""
    word_count = int(duration * WORDS_PER_SECOND)

    lines = [
        f"Create a compelling {duration}-second YouTube video script about: {topic}",
        "",
        "Requirements:",
        f"- Target word count: ~{word_count} words",
        f"- Tone: {tone}",
        f"- Target audience: {target_audience}",
        "- High retention: Use pattern interrupts, questions, and engaging transitions",
    ]
    if include_hook:
        lines.append("- Start with a powerful hook in the first 3 seconds")
    if include_call_to_action:
        lines.append("- End with a clear call-to-action")

    lines += [
        "",
        "Format the script with:",
        "1. HOOK: Opening line",
        "2. MAIN CONTENT: Core message broken into engaging segments",
        "3. CALL TO ACTION: Closing statement",
        "",
        "Make it perfect for voiceover - conversational, clear, and engaging.",
    ]
    return "\n".join(lines)


class ScriptGenerator:
    """Generates scripts and voiceover-ready text."""

    def __init__(self, llm: TextGenerator | None = None):
        self.llm = llm or TextGenerator()

    async def generate_video_script(
        self,
        topic: str,
        duration: int = 120,
        tone: str = "engaging",
        target_audience: str | None = None,
        include_hook: bool = True,
        include_call_to_action: bool = True,
    ) -> VideoScript:
        """
        Generate a high-retention video script.

        Args:
            topic: What the video is about
            duration: Target length in seconds
            tone: Writing tone
            target_audience: Audience description (defaults to settings)
            include_hook: Ask for an opening hook
            include_call_to_action: Ask for a closing CTA

        Returns:
            VideoScript with parsed sections and the raw full_script

        Raises:
            UpstreamError: If the model call fails
        """
        target_audience = target_audience or get_settings().target_audience
        log = logger.bind(topic=topic[:50], duration=duration)
        log.info("generating_video_script")

        prompt = build_script_prompt(
            topic, duration, tone, target_audience, include_hook, include_call_to_action
        )
        try:
            completion = await self.llm.complete(
                prompt, system=SCRIPT_SYSTEM_PROMPT, temperature=0.8, max_tokens=2000
            )
        except Exception as e:
            log.bind(error=str(e)).error("video_script_generation_error")
            raise UpstreamError(f"Script generation failed: {e}") from e

        parsed = parse_script(completion.text)
        log.bind(word_count=len(parsed.full_script.split())).info("video_script_generated")

        return VideoScript(
            topic=topic,
            duration=duration,
            tone=tone,
            **parsed.model_dump(),
            metadata=GenerationMetadata(
                model=completion.model,
                tokens=completion.total_tokens,
            ),
        )

    async def generate_voiceover_text(self, script: str) -> str:
        """Rewrite a script for narration, with [PAUSE] markers and CAPS emphasis."""
        logger.info("generating_voiceover_text")
        prompt = (
            "Convert this script into voiceover-ready text with proper pauses and emphasis:"
            f"\n\n{script}\n\n"
            "Add [PAUSE] where natural breaks should occur, and use CAPS for emphasis. "
            "Keep it natural and conversational."
        )
        try:
            completion = await self.llm.complete(
                prompt, system=VOICEOVER_SYSTEM_PROMPT, temperature=0.5, max_tokens=1500
            )
        except Exception as e:
            logger.bind(error=str(e)).error("voiceover_text_generation_error")
            raise UpstreamError(f"Voiceover text generation failed: {e}") from e

        return completion.text

    async def generate_script_variations(self, topic: str, count: int = 3) -> list[VideoScript]:
        """Generate count scripts for the same topic, cycling through tones."""
        logger.bind(topic=topic[:50], count=count).info("generating_script_variations")
        variations = []
        for i in range(count):
            script = await self.generate_video_script(
                topic=topic,
                tone=VARIATION_TONES[i % len(VARIATION_TONES)],
                duration=120,
            )
            variations.append(script)
        return variations


def estimate_script_duration(script: VideoScript) -> float:
    """
    Estimate the narration length of a script based on word count.

    Assumes ~150 words per minute speaking rate (2.5 words/second).
    """
    return len(script.full_script.split()) / WORDS_PER_SECOND
