"""Shared outbound HTTP helper with timeout and retries."""

from typing import Any

import backoff
import httpx

from reelforge.config import get_settings
from reelforge.core.exceptions import UpstreamError
from reelforge.core.logging import get_logger

logger = get_logger(__name__)


def _error_detail(error: httpx.HTTPError) -> str:
    """Best-effort human readable message from a failed request."""
    if isinstance(error, httpx.HTTPStatusError):
        try:
            data = error.response.json()
        except ValueError:
            return f"HTTP {error.response.status_code}"
        if isinstance(data, dict):
            api_error = data.get("error")
            if isinstance(api_error, dict) and api_error.get("message"):
                return str(api_error["message"])
            if data.get("message"):
                return str(data["message"])
        return f"HTTP {error.response.status_code}"
    return str(error) or error.__class__.__name__


def _log_retry(details: dict[str, Any]) -> None:
    logger.bind(
        url=details["kwargs"].get("url"),
        attempt=details["tries"],
        delay_seconds=round(details["wait"], 2),
        error=str(details.get("exception")),
    ).warning("http_retry_attempt")


def _log_giveup(details: dict[str, Any]) -> None:
    logger.bind(
        url=details["kwargs"].get("url"),
        attempts=details["tries"],
        error=str(details.get("exception")),
    ).error("http_retry_exhausted")


async def make_request(
    method: str,
    url: str,
    *,
    params: dict[str, Any] | None = None,
    json: Any = None,
    headers: dict[str, str] | None = None,
    timeout: float | None = None,
    retries: int | None = None,
    client: httpx.AsyncClient | None = None,
) -> Any:
    """
    Make an HTTP request and return the decoded JSON body.

    Retries any transport error or non-2xx response with exponential backoff
    (1s, 2s, ...). After the last attempt the failure is raised as
    UpstreamError.

    Args:
        method: HTTP method
        url: Absolute URL
        params: Query string parameters
        json: JSON request body
        headers: Extra request headers
        timeout: Per-request timeout in seconds (defaults to settings)
        retries: Total attempts (defaults to settings)
        client: Optional client to reuse (tests inject a MockTransport client)

    Returns:
        Decoded JSON response, or an empty dict for empty or non-JSON bodies
    """
    settings = get_settings()
    timeout = timeout if timeout is not None else settings.http_timeout_seconds
    attempts = retries if retries is not None else settings.http_max_retries

    async def _send(http: httpx.AsyncClient, url: str) -> Any:
        resp = await http.request(
            method, url, params=params, json=json, headers=headers, timeout=timeout
        )
        resp.raise_for_status()
        if not resp.content:
            return {}
        try:
            return resp.json()
        except ValueError:
            logger.bind(url=url, content_type=resp.headers.get("content-type")).debug(
                "http_response_not_json"
            )
            return {}

    @backoff.on_exception(
        backoff.expo,
        httpx.HTTPError,
        max_tries=max(1, attempts),
        jitter=None,
        on_backoff=_log_retry,
        on_giveup=_log_giveup,
    )
    async def _attempt(*, url: str) -> Any:
        if client is not None:
            return await _send(client, url)
        async with httpx.AsyncClient() as http:
            return await _send(http, url)

    try:
        return await _attempt(url=url)
    except httpx.HTTPError as e:
        raise UpstreamError(f"Request to {url} failed: {_error_detail(e)}") from e
