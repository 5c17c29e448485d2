import random
import re
import string
import time
from typing import TypeVar

HASHTAG_PATTERN = re.compile(r"#[a-zA-Z0-9_]+")
ELLIPSIS = "..."

_ID_ALPHABET = string.digits + string.ascii_lowercase

T = TypeVar("T")


def truncate_text(text: str, max_length: int, suffix: str = ELLIPSIS) -> str:
    """
    Truncate text to at most max_length characters.

    When truncation happens the suffix is appended and counted against the
    limit, so the result never exceeds max_length and the suffix is never cut.
    """
    if len(text) <= max_length:
        return text
    if max_length <= len(suffix):
        return text[:max_length]
    return text[: max_length - len(suffix)] + suffix


def extract_hashtags(text: str) -> list[str]:
    """Return all #hashtags found in text, in order of appearance."""
    return HASHTAG_PATTERN.findall(text)


def sanitize_filename(filename: str) -> str:
    """Replace anything outside [a-z0-9._-] with an underscore and lowercase."""
    return re.sub(r"[^a-z0-9._-]", "_", filename, flags=re.IGNORECASE).lower()


def format_duration(seconds: int) -> str:
    """Format seconds as m:ss."""
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes}:{secs:02d}"


def generate_id() -> str:
    """Generate a unique id of the form <epoch-ms>-<9 base36 chars>."""
    suffix = "".join(random.choices(_ID_ALPHABET, k=9))
    return f"{int(time.time() * 1000)}-{suffix}"


def chunk_list(items: list[T], size: int) -> list[list[T]]:
    """Split items into consecutive chunks of at most size elements."""
    if size < 1:
        raise ValueError("size must be >= 1")
    return [items[i : i + size] for i in range(0, len(items), size)]
