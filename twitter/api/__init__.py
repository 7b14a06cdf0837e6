"""Async client for the v2 REST and streaming API."""

from ._version import __version__
from .auth import AuthProvider, BearerToken, OAuth2User
from .clients import Client
from .core import (
    AuthError,
    HttpError,
    ParseError,
    PartialError,
    RateLimitError,
    TwitterAPIError,
)
from .models import (
    ErrorDetail,
    OAuth2Token,
    PageMeta,
    RateLimit,
    ResponseEnvelope,
    StreamRule,
    Tweet,
    User,
)
from .runtime import Paginator, StreamDecoder

__all__ = [
    "__version__",
    "Client",
    # Auth
    "AuthProvider",
    "BearerToken",
    "OAuth2User",
    # Errors
    "TwitterAPIError",
    "HttpError",
    "AuthError",
    "RateLimitError",
    "ParseError",
    "PartialError",
    # Models
    "ErrorDetail",
    "OAuth2Token",
    "PageMeta",
    "RateLimit",
    "ResponseEnvelope",
    "StreamRule",
    "Tweet",
    "User",
    # Sequences
    "Paginator",
    "StreamDecoder",
]
