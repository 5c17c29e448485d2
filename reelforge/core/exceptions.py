"""
Exception hierarchy for Reelforge.

Every error carries the HTTP status the API layer renders it with, so route
handlers can simply let exceptions propagate.
"""

from typing import Any


class ReelforgeError(Exception):
    """Base exception for all Reelforge errors."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(ReelforgeError):
    """A required request field is missing or malformed."""

    status_code = 400


class MissingTopicError(ValidationError):
    """No topic was supplied and none could be discovered."""

    def __init__(self, message: str = "No topic provided or discovered"):
        super().__init__(message)


class NotFoundError(ReelforgeError):
    """Unknown route or named resource."""

    status_code = 404


class UnknownJobError(NotFoundError):
    """Raised when a job name is not registered with the scheduler."""

    def __init__(self, job_name: str):
        self.job_name = job_name
        super().__init__(f"Unknown job: {job_name}")


class ConflictError(ReelforgeError):
    """The request conflicts with work already in progress."""

    status_code = 409


class JobAlreadyRunningError(ConflictError):
    """Raised when a job is triggered while another run of it is in flight."""

    def __init__(self, job_name: str):
        self.job_name = job_name
        super().__init__(f"Job {job_name} is already running")


class UpstreamError(ReelforgeError):
    """An external API call (LLM, TTS, trend source, platform) failed."""

    status_code = 500


class RateLimitError(ReelforgeError):
    """Client exceeded the configured request rate."""

    status_code = 429

    def __init__(self, message: str = "Too many requests from this IP, please try again later."):
        super().__init__(message)
