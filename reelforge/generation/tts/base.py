"""Base classes for TTS providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

PAUSE_MARKER = "[PAUSE]"


@dataclass
class TTSResult:
    """Result of TTS synthesis."""

    audio_path: Path
    size: int  # bytes
    voice: str
    model: str | None = None


class TTSProvider(ABC):
    """Abstract base class for TTS providers."""

    name: str

    @abstractmethod
    async def synthesize(self, text: str, output_path: Path) -> TTSResult:
        """
        Synthesize speech from text and write it to output_path.

        Args:
            text: Text to synthesize
            output_path: Path to save the audio file

        Returns:
            TTSResult with audio path and size

        Raises:
            UpstreamError: If the provider is not configured or the call fails
        """

    def prepare_text(self, text: str) -> str:
        """Turn [PAUSE] markers into spoken pauses."""
        return text.replace(PAUSE_MARKER, "...")
