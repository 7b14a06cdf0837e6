"""Custom exception hierarchy."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..models import ErrorDetail, RateLimit


class TwitterAPIError(Exception):
    """Base exception for all library errors."""

    pass


class HttpError(TwitterAPIError):
    """Non-2xx response from the API.

    Carries the status code and the response body, parsed as JSON when
    possible and as raw text otherwise.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        *,
        reason: str = "",
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.body = body
        self.headers = dict(headers) if headers else {}


class AuthError(HttpError):
    """Credential missing or rejected.

    Raised before any request is sent when no credential is available
    (``status_code`` is None), and for 401/403 responses. Never retried.
    """

    pass


class RateLimitError(HttpError):
    """Rate limit window exhausted (429)."""

    def __init__(
        self,
        message: str,
        *,
        rate_limit: RateLimit | None = None,
        reason: str = "",
        body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message, 429, reason=reason, body=body, headers=headers)
        self.rate_limit = rate_limit


class ParseError(TwitterAPIError):
    """Malformed JSON in a response body or a stream line."""

    def __init__(self, message: str, raw: str | bytes = "") -> None:
        super().__init__(message)
        self.raw = raw


class PartialError(TwitterAPIError):
    """Envelope carries ``errors`` next to (possibly absent) ``data``.

    The request pipeline never raises this; it is raised only by
    ``ResponseEnvelope.raise_for_errors()`` when the caller asks for it.
    """

    def __init__(self, message: str, errors: list[ErrorDetail], data: Any = None) -> None:
        super().__init__(message)
        self.errors = errors
        self.data = data
