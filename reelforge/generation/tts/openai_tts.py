"""OpenAI TTS provider."""

from pathlib import Path

from openai import AsyncOpenAI

from reelforge.config import get_settings
from reelforge.core.exceptions import UpstreamError
from reelforge.core.logging import get_logger
from reelforge.generation.tts.base import TTSProvider, TTSResult

logger = get_logger(__name__)

OPENAI_VOICES = ["alloy", "echo", "fable", "onyx", "nova", "shimmer"]


class OpenAITTS(TTSProvider):
    """
    OpenAI TTS provider.

    Costs ~$15/1M characters with tts-1.
    """

    name = "openai"

    def __init__(
        self,
        voice: str | None = None,
        model: str | None = None,
        speed: float = 1.0,
        api_key: str | None = None,
        client: AsyncOpenAI | None = None,
    ):
        """
        Initialize OpenAI TTS provider.

        Args:
            voice: One of alloy, echo, fable, onyx, nova, shimmer
            model: tts-1 or tts-1-hd
            speed: Playback speed multiplier
            api_key: Optional API key (defaults to settings)
            client: Optional preconfigured client
        """
        settings = get_settings()
        self.api_key = api_key or settings.openai_api_key
        self.voice = voice or settings.openai_tts_voice
        self.model = model or settings.openai_tts_model
        self.speed = speed
        self._client = client

    async def synthesize(self, text: str, output_path: Path) -> TTSResult:
        """Synthesize speech using OpenAI TTS."""
        if self._client is None and not self.api_key:
            raise UpstreamError("OpenAI voiceover generation failed: API key not configured")

        try:
            client = self._client or AsyncOpenAI(api_key=self.api_key)
            response = await client.audio.speech.create(
                model=self.model,
                voice=self.voice,
                input=self.prepare_text(text),
                speed=self.speed,
            )

            audio = response.content
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(audio)
        except Exception as e:
            logger.bind(error=str(e)).error("openai_tts_synthesis_error")
            raise UpstreamError(f"OpenAI voiceover generation failed: {e}") from e

        logger.bind(
            voice=self.voice,
            model=self.model,
            size=len(audio),
            path=str(output_path),
        ).info("openai_tts_synthesized")

        return TTSResult(audio_path=output_path, size=len(audio), voice=self.voice, model=self.model)
