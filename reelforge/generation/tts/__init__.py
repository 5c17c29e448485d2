"""Text-to-speech providers for voiceover audio."""

from reelforge.generation.tts.base import TTSProvider, TTSResult
from reelforge.generation.tts.elevenlabs_tts import ElevenLabsTTS
from reelforge.generation.tts.openai_tts import OPENAI_VOICES, OpenAITTS


def get_tts_provider(provider: str = "openai") -> TTSProvider:
    """
    Get a TTS provider by name.

    Args:
        provider: "openai" or "elevenlabs"; anything else falls back to OpenAI
    """
    if provider == "elevenlabs":
        return ElevenLabsTTS()
    return OpenAITTS()


__all__ = [
    "OPENAI_VOICES",
    "ElevenLabsTTS",
    "OpenAITTS",
    "TTSProvider",
    "TTSResult",
    "get_tts_provider",
]
