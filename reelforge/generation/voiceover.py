"""Voiceover synthesis on top of the configured TTS provider."""

from pathlib import Path

from reelforge.config import get_settings
from reelforge.core.logging import get_logger
from reelforge.core.text_utils import generate_id, sanitize_filename
from reelforge.generation.tts import OPENAI_VOICES, TTSProvider, get_tts_provider
from reelforge.schemas.content import VoiceoverAsset

logger = get_logger(__name__)

AVAILABLE_VOICES: dict[str, list[str]] = {
    "openai": OPENAI_VOICES,
    # ElevenLabs voices are account-specific
    "elevenlabs": [],
}


def get_available_voices(provider: str = "openai") -> list[str]:
    """Known voice names for a provider; empty for unknown providers."""
    return list(AVAILABLE_VOICES.get(provider, []))


class VoiceoverService:
    """Writes voiceover audio files into the configured output directory."""

    def __init__(
        self,
        output_dir: Path | str | None = None,
        providers: dict[str, TTSProvider] | None = None,
    ):
        self.output_dir = Path(output_dir or get_settings().audio_output_dir)
        self._providers = providers or {}

    def get_provider(self, name: str | None = None) -> TTSProvider:
        name = name or get_settings().tts_provider
        if name not in self._providers:
            self._providers[name] = get_tts_provider(name)
        return self._providers[name]

    async def generate_voiceover(
        self,
        text: str,
        filename: str | None = None,
        provider: str | None = None,
    ) -> VoiceoverAsset:
        """
        Synthesize text to an mp3 file.

        Args:
            text: Narration text; [PAUSE] markers become spoken pauses
            filename: Output file name (sanitized); generated when omitted
            provider: "openai" or "elevenlabs" (defaults to settings)

        Raises:
            UpstreamError: If synthesis fails
        """
        tts = self.get_provider(provider)
        filename = filename or f"voiceover_{generate_id()}.mp3"
        output_path = self.output_dir / sanitize_filename(filename)

        logger.bind(provider=tts.name, text_length=len(text)).info("generating_voiceover")
        result = await tts.synthesize(text, output_path)

        return VoiceoverAsset(
            path=str(result.audio_path),
            filename=filename,
            size=result.size,
            provider=tts.name,
            voice=result.voice,
            model=result.model,
        )

    async def generate_segmented_voiceovers(self, segments: list[str]) -> list[VoiceoverAsset]:
        """Synthesize each segment to its own file, in order. Stops at the first failure."""
        logger.bind(segment_count=len(segments)).info("generating_segmented_voiceovers")
        batch = generate_id()
        voiceovers = []
        for i, segment in enumerate(segments, 1):
            voiceovers.append(
                await self.generate_voiceover(segment, filename=f"segment_{i}_{batch}.mp3")
            )
        logger.bind(count=len(voiceovers)).info("segmented_voiceovers_generated")
        return voiceovers
