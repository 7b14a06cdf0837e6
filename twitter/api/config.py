"""Shared API constants.

This module centralizes URLs, header names and protocol constants used by the
transport, the OAuth flow and the stream decoder so the client can stay small.
"""

from __future__ import annotations

from ._version import __version__

# REST base URL. Endpoint paths carry the "/2" version prefix themselves.
BASE_URL = "https://api.twitter.com"

# Total request timeout in seconds. Streaming connections are opened without a
# total timeout since they are expected to stay open indefinitely.
DEFAULT_TIMEOUT = 30.0

# Product-identifying user agent sent with every request
USER_AGENT = f"twitter-api-python-sdk/{__version__}"

# OAuth 2.0 (authorization code + PKCE) endpoints
AUTHORIZE_URL = "https://twitter.com/i/oauth2/authorize"
TOKEN_URL = f"{BASE_URL}/2/oauth2/token"
REVOKE_URL = f"{BASE_URL}/2/oauth2/revoke"

# Rate-limit headers, lower-cased: (limit, remaining, reset)
RATE_LIMIT_LIMIT_HEADER = "x-rate-limit-limit"
RATE_LIMIT_REMAINING_HEADER = "x-rate-limit-remaining"
RATE_LIMIT_RESET_HEADER = "x-rate-limit-reset"
RATE_LIMIT_HEADERS = (
    RATE_LIMIT_LIMIT_HEADER,
    RATE_LIMIT_REMAINING_HEADER,
    RATE_LIMIT_RESET_HEADER,
)

# Streaming endpoints terminate each JSON record with CRLF
STREAM_DELIMITER = b"\r\n"

# Query parameter carrying the continuation token for most list endpoints.
# Search endpoints use "next_token" instead.
DEFAULT_CURSOR_PARAM = "pagination_token"
