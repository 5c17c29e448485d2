"""Rate limiting configuration using SlowAPI."""

from fastapi import Request
from limits import parse_many
from slowapi import Limiter
from slowapi.util import get_remote_address

from reelforge.config import get_settings
from reelforge.core.exceptions import RateLimitError
from reelforge.core.logging import get_logger

logger = get_logger(__name__)

GLOBAL_SCOPE = "api"


def default_limit() -> str:
    """Build the global limit string from RATE_LIMIT_WINDOW_MS / RATE_LIMIT_MAX_REQUESTS."""
    settings = get_settings()
    window_seconds = max(1, settings.rate_limit_window_ms // 1000)
    return f"{settings.rate_limit_max_requests}/{window_seconds} seconds"


# IP-based limiter; its storage holds the per-client counters
limiter = Limiter(key_func=get_remote_address)


def enforce_rate_limit(request: Request) -> None:
    """
    Count the request against the caller's global limit.

    Attached to the /api router so the check runs per route, independent of
    how the application lays out its mounted routers.

    Raises:
        RateLimitError: The client exceeded the limit for the current window
    """
    if not limiter.enabled:
        return

    client = get_remote_address(request)
    for item in parse_many(default_limit()):
        if not limiter.limiter.hit(item, GLOBAL_SCOPE, client):
            logger.bind(client=client, path=request.url.path, limit=str(item)).warning(
                "rate_limit_exceeded"
            )
            raise RateLimitError()
