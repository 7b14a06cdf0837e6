"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from twitter.api.core import (
    AuthError,
    HttpError,
    ParseError,
    PartialError,
    RateLimitError,
    TwitterAPIError,
)
from twitter.api.models import ErrorDetail, RateLimit


def test_rate_limit_error_carries_window():
    """Test RateLimitError exposes status 429 and the parsed window."""
    window = RateLimit(limit=450, remaining=0, reset=1_700_000_900_000)
    error = RateLimitError("429 Too Many Requests", rate_limit=window)
    assert error.status_code == 429
    assert error.rate_limit is window
    assert isinstance(error, HttpError)
    assert isinstance(error, TwitterAPIError)


def test_http_error_keeps_body_and_headers():
    error = HttpError("boom", 503, reason="Service Unavailable", body="down", headers={"a": "b"})
    assert str(error) == "boom"
    assert error.status_code == 503
    assert error.body == "down"
    assert error.headers == {"a": "b"}


def test_auth_error_without_status():
    """Test a pre-request credential failure has no status code."""
    error = AuthError("Bearer token is missing")
    assert error.status_code is None
    assert isinstance(error, HttpError)


def test_parse_error_keeps_raw_input():
    error = ParseError("Malformed stream line", raw=b"{oops")
    assert error.raw == b"{oops"
    assert not isinstance(error, HttpError)


def test_partial_error_carries_errors_and_data():
    errors = [ErrorDetail(title="Not Found Error")]
    error = PartialError("1 error(s)", errors=errors, data=[{"id": "20"}])
    assert error.errors == errors
    assert error.data == [{"id": "20"}]
