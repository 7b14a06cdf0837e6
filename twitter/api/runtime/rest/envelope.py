"""Response envelope decoding and status evaluation.

Status and body are judged together: a non-2xx status always raises, even
when the body is a well-formed envelope, and a 2xx status always returns the
decoded body, even when it carries ``errors`` (partial success).
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from ...core.exceptions import AuthError, HttpError, ParseError, RateLimitError
from ...models import RateLimit, ResponseEnvelope
from .http_client import HTTPResponse


def _error_summary(body: Any) -> str | None:
    """Pick a human-readable message out of an error body."""
    if not isinstance(body, dict):
        return None
    for key in ("detail", "title", "error_description", "error"):
        value = body.get(key)
        if isinstance(value, str) and value:
            return value
    errors = body.get("errors")
    if isinstance(errors, list) and errors and isinstance(errors[0], dict):
        first = errors[0]
        return first.get("message") or first.get("detail") or first.get("title")
    return None


def _error_body(response: HTTPResponse) -> Any:
    if not response.body.strip():
        return None
    try:
        return json.loads(response.body)
    except ValueError:
        return response.text()


def raise_for_status(response: HTTPResponse) -> None:
    """Raise the matching HttpError subclass for a non-2xx response."""
    if response.ok:
        return

    body = _error_body(response)
    message = f"{response.status} {response.reason}".strip()
    summary = _error_summary(body)
    if summary:
        message = f"{message}: {summary}"

    if response.status == 429:
        try:
            rate_limit = RateLimit.from_headers(response.headers)
        except ValueError:
            rate_limit = None
        raise RateLimitError(
            message,
            rate_limit=rate_limit,
            reason=response.reason,
            body=body,
            headers=response.headers,
        )
    error_cls = AuthError if response.status in (401, 403) else HttpError
    raise error_cls(
        message,
        response.status,
        reason=response.reason,
        body=body,
        headers=response.headers,
    )


def parse_envelope(response: HTTPResponse) -> Any:
    """Decode a response body into its raw envelope object.

    Returns:
        The decoded JSON value, or None for an empty 2xx body

    Raises:
        HttpError: If the status is not 2xx (AuthError for 401/403,
            RateLimitError for 429)
        ParseError: If a 2xx body is not valid JSON
    """
    raise_for_status(response)
    if not response.body.strip():
        return None
    try:
        return json.loads(response.body)
    except ValueError as e:
        raise ParseError(
            f"Invalid JSON in {response.status} response: {e}", raw=response.text()
        ) from e


def validate_envelope(envelope_cls: type[ResponseEnvelope[Any]], raw: Any) -> ResponseEnvelope[Any]:
    """Validate a decoded body into ``envelope_cls``.

    Raises:
        ParseError: If the body is valid JSON but not the expected shape
    """
    try:
        return envelope_cls.model_validate(raw if raw is not None else {})
    except ValidationError as e:
        raise ParseError(
            f"Unexpected response shape for {envelope_cls.__name__}: {e.error_count()} error(s)",
            raw=json.dumps(raw),
        ) from e
