"""Core components."""

from .exceptions import (
    AuthError,
    HttpError,
    ParseError,
    PartialError,
    RateLimitError,
    TwitterAPIError,
)

__all__ = [
    "TwitterAPIError",
    "HttpError",
    "AuthError",
    "RateLimitError",
    "ParseError",
    "PartialError",
]
