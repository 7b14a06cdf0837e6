"""REST runtime abstractions."""

from .envelope import parse_envelope, raise_for_status, validate_envelope
from .http_client import HTTPClient, HTTPResponse, StreamingResponse
from .paginator import Paginator
from .query import build_query, path_segment
from .rate_limit import RateLimitObserver, track_rate_limit
from .runner import EnvelopeAdapter, ResponseAdapter, RestEndpointSpec, RestRunner
from .transport import RESTTransport

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "StreamingResponse",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "EnvelopeAdapter",
    "Paginator",
    "RateLimitObserver",
    "track_rate_limit",
    "parse_envelope",
    "raise_for_status",
    "validate_envelope",
    "build_query",
    "path_segment",
]
