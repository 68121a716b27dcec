"""Tests for the exception hierarchy."""

import pytest

from atlassian_cloud.core.exceptions import (
    STATUS_ERRORS,
    AtlassianConnectionError,
    AtlassianError,
    AuthenticationError,
    DecodeError,
    NotFoundError,
    RateLimitError,
    RequestFailedError,
    ValidationError,
)


class TestAtlassianError:
    """Tests for the base error."""

    def test_str_with_provider(self) -> None:
        assert str(AtlassianError("boom", provider="jira")) == "[jira] boom"

    def test_str_without_provider(self) -> None:
        error = AtlassianError("boom")
        assert str(error) == "boom"
        assert error.details == {}

    @pytest.mark.parametrize(
        "error",
        [
            ValidationError("no issue key/id set", field="issue_key_or_id"),
            AtlassianConnectionError("refused"),
            DecodeError("not JSON"),
            RequestFailedError("failed", status_code=418),
        ],
    )
    def test_all_errors_share_base(self, error: AtlassianError) -> None:
        """Test that callers can catch every library error at once."""
        assert isinstance(error, AtlassianError)


class TestRequestFailedError:
    """Tests for status errors."""

    def test_attributes(self) -> None:
        error = NotFoundError(
            "Request failed: 404",
            status_code=404,
            method="GET",
            endpoint="https://test.atlassian.net/rest/api/3/issue/KP-9",
            response={"errorMessages": ["Issue does not exist"]},
            provider="jira",
        )
        assert error.status_code == 404
        assert error.method == "GET"
        assert error.response == {"errorMessages": ["Issue does not exist"]}
        assert isinstance(error, RequestFailedError)

    def test_rate_limit_defaults(self) -> None:
        error = RateLimitError("slow down", retry_after=12)
        assert error.status_code == 429
        assert error.retry_after == 12

    def test_status_table(self) -> None:
        assert STATUS_ERRORS[401] is AuthenticationError
        assert STATUS_ERRORS[404] is NotFoundError
        assert STATUS_ERRORS[429] is RateLimitError
        assert all(issubclass(cls, RequestFailedError) for cls in STATUS_ERRORS.values())
