"""Tests for the exception hierarchy."""

from reelforge.core.exceptions import (
    JobAlreadyRunningError,
    MissingTopicError,
    RateLimitError,
    ReelforgeError,
    UnknownJobError,
    UpstreamError,
    ValidationError,
)


class TestReelforgeError:
    def test_str_without_details(self):
        assert str(ReelforgeError("boom")) == "boom"

    def test_str_with_details(self):
        assert str(ReelforgeError("boom", {"id": 1})) == "boom | Details: {'id': 1}"

    def test_default_status(self):
        assert ReelforgeError("x").status_code == 500


class TestStatusCodes:
    def test_client_errors(self):
        assert ValidationError("x").status_code == 400
        assert MissingTopicError().status_code == 400
        assert UnknownJobError("nope").status_code == 404
        assert JobAlreadyRunningError("trendDiscovery").status_code == 409
        assert RateLimitError().status_code == 429

    def test_upstream_is_server_error(self):
        assert UpstreamError("x").status_code == 500


class TestMessages:
    def test_unknown_job(self):
        error = UnknownJobError("nope")
        assert error.message == "Unknown job: nope"
        assert error.job_name == "nope"

    def test_already_running(self):
        assert JobAlreadyRunningError("contentPosting").message == "Job contentPosting is already running"

    def test_missing_topic_is_validation_error(self):
        assert isinstance(MissingTopicError(), ValidationError)
