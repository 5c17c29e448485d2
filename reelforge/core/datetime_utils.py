"""Centralized datetime utilities for consistent timezone handling.

All functions work with timezone-aware UTC datetimes. Naive inputs are
assumed to already be in UTC.

Usage:
    from reelforge.core.datetime_utils import utc_now, parse_iso_datetime, days_since

    published = parse_iso_datetime("2026-01-11T08:00:00Z")
    age = days_since(published)
"""

from datetime import UTC, datetime


def utc_now() -> datetime:
    """Get current UTC time as an aware datetime."""
    return datetime.now(UTC)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def parse_iso_datetime(value: str | datetime | None) -> datetime | None:
    """
    Parse an ISO 8601 timestamp (as returned by the YouTube Data API).

    Args:
        value: ISO string, datetime, or None

    Returns:
        Aware UTC datetime, or None if the value is missing or unparseable
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    try:
        return ensure_utc(datetime.fromisoformat(value.strip()))
    except ValueError:
        return None


def days_since(value: datetime, now: datetime | None = None) -> float:
    """Fractional days elapsed between value and now."""
    now = ensure_utc(now) if now else utc_now()
    return (now - ensure_utc(value)).total_seconds() / 86_400


def isoformat_z(value: datetime) -> str:
    """Format an aware datetime as ISO 8601 with a trailing Z."""
    return ensure_utc(value).isoformat().replace("+00:00", "Z")
