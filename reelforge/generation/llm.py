"""Thin wrapper around the OpenAI chat completions API."""

from dataclasses import dataclass

import backoff
from httpx import HTTPStatusError
from openai import AsyncOpenAI, RateLimitError

from reelforge.config import get_settings
from reelforge.core.exceptions import UpstreamError
from reelforge.core.logging import get_logger

logger = get_logger(__name__)


@dataclass
class Completion:
    """Text returned by the model plus token usage."""

    text: str
    model: str
    total_tokens: int | None = None


def get_openai_client() -> AsyncOpenAI:
    """Build an AsyncOpenAI client from settings."""
    settings = get_settings()
    if not settings.openai_api_key:
        raise UpstreamError("OpenAI API key not configured")
    return AsyncOpenAI(api_key=settings.openai_api_key)


class TextGenerator:
    """Prompt in, text out. Shared by every generation step provider."""

    def __init__(self, client: AsyncOpenAI | None = None, model: str | None = None):
        self._client = client
        self.model = model or get_settings().llm_model

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            self._client = get_openai_client()
        return self._client

    @backoff.on_exception(
        backoff.expo,
        (RateLimitError, HTTPStatusError),
        max_tries=5,
        max_time=120,
    )
    async def complete(
        self,
        prompt: str,
        *,
        system: str,
        temperature: float = 0.7,
        max_tokens: int = 1000,
    ) -> Completion:
        """
        Run a single chat completion.

        Rate limit errors are retried with exponential backoff; anything else
        propagates to the caller.
        """
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system},
                {"role": "user", "content": prompt},
            ],
            temperature=temperature,
            max_tokens=max_tokens,
        )

        text = response.choices[0].message.content or ""
        usage = response.usage
        total_tokens = usage.total_tokens if usage else None
        logger.bind(model=self.model, tokens=total_tokens).debug("llm_completion")
        return Completion(text=text, model=self.model, total_tokens=total_tokens)
