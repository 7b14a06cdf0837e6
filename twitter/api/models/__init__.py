"""Data models for API payloads and response metadata.

Architecture:
    This module exports the Pydantic v2 models used throughout the library.
    All models are immutable (frozen=True). Payload models keep unknown keys
    (extra="allow") since the fields returned depend on what the caller
    requested through ``*.fields`` and ``expansions`` options.

Model Categories:
    - Envelope: ResponseEnvelope, PageMeta, ErrorDetail
    - Quota: RateLimit
    - Payloads: Tweet, User, StreamRule
    - Auth: OAuth2Token
"""

from .envelope import ErrorDetail, PageMeta, ResponseEnvelope
from .oauth2_token import OAuth2Token
from .rate_limit import RateLimit
from .stream_rule import StreamRule
from .tweet import Tweet
from .user import User

__all__ = [
    "ErrorDetail",
    "OAuth2Token",
    "PageMeta",
    "RateLimit",
    "ResponseEnvelope",
    "StreamRule",
    "Tweet",
    "User",
]
