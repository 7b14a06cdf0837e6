"""Runtime layer: request execution, pagination and stream decoding.

Architecture:
    - rest: HTTP client, transport (credential injection), rate-limit
      tracking, envelope parsing, pagination and the endpoint runner
    - stream: line-delimited JSON decoding of streaming responses
"""

from .rest import Paginator, RESTTransport, RestEndpointSpec, RestRunner
from .stream import StreamDecoder

__all__ = [
    "Paginator",
    "RESTTransport",
    "RestEndpointSpec",
    "RestRunner",
    "StreamDecoder",
]
