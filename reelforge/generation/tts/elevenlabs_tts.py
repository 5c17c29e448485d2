"""ElevenLabs TTS provider."""

from pathlib import Path

from elevenlabs import VoiceSettings
from elevenlabs.client import AsyncElevenLabs

from reelforge.config import get_settings
from reelforge.core.exceptions import UpstreamError
from reelforge.core.logging import get_logger
from reelforge.generation.tts.base import TTSProvider, TTSResult

logger = get_logger(__name__)


class ElevenLabsTTS(TTSProvider):
    """
    ElevenLabs TTS provider.

    Best quality voices, streamed through the async SDK client.
    Requires ELEVENLABS_API_KEY in environment.
    """

    name = "elevenlabs"

    def __init__(
        self,
        voice_id: str | None = None,
        model_id: str = "eleven_monolingual_v1",
        stability: float = 0.5,
        similarity_boost: float = 0.75,
        api_key: str | None = None,
        client: AsyncElevenLabs | None = None,
    ):
        """
        Initialize ElevenLabs TTS provider.

        Args:
            voice_id: Voice ID to use (defaults to settings, "Adam")
            model_id: ElevenLabs model
            stability: Voice stability, 0-1
            similarity_boost: Voice similarity boost, 0-1
            api_key: Optional API key override
            client: Optional preconfigured client
        """
        settings = get_settings()
        self.voice_id = voice_id or settings.elevenlabs_voice_id
        self.model_id = model_id
        self.stability = stability
        self.similarity_boost = similarity_boost
        self.api_key = api_key or settings.elevenlabs_api_key
        self.timeout = settings.http_timeout_seconds
        self._client = client

    async def synthesize(self, text: str, output_path: Path) -> TTSResult:
        """Synthesize speech with ElevenLabs."""
        if self._client is None and not self.api_key:
            logger.error("elevenlabs_api_key_not_set")
            raise UpstreamError(
                "ElevenLabs voiceover generation failed: ElevenLabs API key not configured"
            )

        logger.bind(voice_id=self.voice_id, text_length=len(text)).info("elevenlabs_synthesis_started")
        try:
            client = self._client or AsyncElevenLabs(api_key=self.api_key, timeout=self.timeout)
            chunks = client.text_to_speech.convert(
                voice_id=self.voice_id,
                text=self.prepare_text(text),
                model_id=self.model_id,
                output_format="mp3_44100_128",
                voice_settings=VoiceSettings(
                    stability=self.stability,
                    similarity_boost=self.similarity_boost,
                ),
            )
            audio = b"".join([chunk async for chunk in chunks])
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_bytes(audio)
        except Exception as e:
            logger.bind(error=str(e)).error("elevenlabs_synthesis_failed")
            raise UpstreamError(f"ElevenLabs voiceover generation failed: {e}") from e

        logger.bind(voice_id=self.voice_id, size=len(audio)).info("elevenlabs_synthesis_complete")
        return TTSResult(
            audio_path=output_path, size=len(audio), voice=self.voice_id, model=self.model_id
        )
