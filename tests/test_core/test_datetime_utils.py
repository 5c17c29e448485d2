"""Tests for UTC datetime utilities."""

from datetime import UTC, datetime, timedelta, timezone

from reelforge.core.datetime_utils import (
    days_since,
    ensure_utc,
    isoformat_z,
    parse_iso_datetime,
    utc_now,
)


class TestUtcNow:
    def test_returns_aware_datetime(self):
        assert utc_now().tzinfo is not None


class TestEnsureUtc:
    def test_naive_assumed_utc(self):
        value = ensure_utc(datetime(2026, 1, 1, 12, 0))
        assert value == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def test_aware_converted(self):
        paris = timezone(timedelta(hours=1))
        value = ensure_utc(datetime(2026, 1, 1, 13, 0, tzinfo=paris))
        assert value == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


class TestParseIsoDatetime:
    """Tests for parse_iso_datetime."""

    def test_parses_youtube_timestamp(self):
        """Should parse the Z-suffixed format returned by the YouTube API."""
        assert parse_iso_datetime("2026-01-11T08:00:00Z") == datetime(2026, 1, 11, 8, tzinfo=UTC)

    def test_none(self):
        assert parse_iso_datetime(None) is None

    def test_invalid_string(self):
        assert parse_iso_datetime("not a date") is None

    def test_datetime_passthrough(self):
        value = datetime(2026, 1, 1, tzinfo=UTC)
        assert parse_iso_datetime(value) == value


class TestDaysSince:
    def test_fractional_days(self):
        now = datetime(2026, 1, 11, 12, tzinfo=UTC)
        assert days_since(datetime(2026, 1, 10, tzinfo=UTC), now=now) == 1.5

    def test_future_is_negative(self):
        now = datetime(2026, 1, 1, tzinfo=UTC)
        assert days_since(datetime(2026, 1, 2, tzinfo=UTC), now=now) == -1


class TestIsoformatZ:
    def test_trailing_z(self):
        assert isoformat_z(datetime(2026, 1, 1, tzinfo=UTC)) == "2026-01-01T00:00:00Z"
