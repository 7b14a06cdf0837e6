"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from dataclasses import dataclass
from typing import Any

from ...config import DEFAULT_CURSOR_PARAM
from ...models import ResponseEnvelope
from ..stream import StreamDecoder
from .envelope import parse_envelope, raise_for_status, validate_envelope
from .http_client import HTTPResponse
from .paginator import Paginator
from .rate_limit import RateLimitObserver, track_rate_limit
from .transport import RESTTransport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST" | "PUT" | "DELETE"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, str]] | None = None
    build_body: Callable[[dict[str, Any]], Any] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None
    # Query parameter the continuation token is sent back under
    cursor_param: str = DEFAULT_CURSOR_PARAM


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class EnvelopeAdapter(ResponseAdapter):
    """Validates the decoded body into ``ResponseEnvelope[model]``."""

    def __init__(self, model: Any = Any) -> None:
        self._envelope = ResponseEnvelope[model]

    def parse(self, response: Any, params: dict[str, Any]) -> ResponseEnvelope[Any]:
        return validate_envelope(self._envelope, response)


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    def _build(
        self, spec: RestEndpointSpec, params: dict[str, Any]
    ) -> tuple[str, dict[str, str], Any, dict[str, str] | None]:
        path = spec.build_path(params)
        query = spec.build_query(params) if spec.build_query else {}
        body = spec.build_body(params) if spec.build_body else None
        headers = spec.build_headers(params) if spec.build_headers else None
        return path, query, body, headers

    async def _send(
        self,
        spec: RestEndpointSpec,
        path: str,
        query: dict[str, str],
        body: Any,
        headers: dict[str, str] | None,
    ) -> HTTPResponse:
        logger.debug(
            "Sending endpoint request",
            extra={"endpoint": spec.id, "method": spec.method, "path": path},
        )
        return await self._t.request(
            spec.method, path, params=query or None, json_body=body, headers=headers
        )

    async def run(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: dict[str, Any],
        rate_limit: RateLimitObserver | None = None,
    ) -> Any:
        """Send one request and return the adapted envelope."""
        path, query, body, headers = self._build(spec, params)
        response = await self._send(spec, path, query, body, headers)
        # The observer sees the quota before the status is evaluated
        track_rate_limit(response.headers, rate_limit)
        return adapter.parse(parse_envelope(response), params)

    def paginate(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: dict[str, Any],
        rate_limit: RateLimitObserver | None = None,
    ) -> Paginator[Any]:
        """Return a Paginator over the endpoint. Nothing is sent until it is awaited."""
        path, query, body, headers = self._build(spec, params)

        async def fetch_page(token: str | None) -> HTTPResponse:
            page_query = dict(query)
            if token is not None:
                page_query[spec.cursor_param] = token
            return await self._send(spec, path, page_query, body, headers)

        return Paginator(
            fetch_page,
            rate_limit=rate_limit,
            parse=lambda raw: adapter.parse(raw, params),
        )

    def stream(
        self,
        *,
        spec: RestEndpointSpec,
        params: dict[str, Any],
        rate_limit: RateLimitObserver | None = None,
    ) -> StreamDecoder:
        """Return a StreamDecoder over the endpoint.

        The connection is opened on the first pull, so errors (including
        HttpError for a non-2xx status) surface from the first iteration step.
        """
        path, query, _, headers = self._build(spec, params)
        return StreamDecoder(self._open_stream(spec, path, query, headers, rate_limit))

    async def _open_stream(
        self,
        spec: RestEndpointSpec,
        path: str,
        query: dict[str, str],
        headers: dict[str, str] | None,
        rate_limit: RateLimitObserver | None,
    ) -> AsyncIterator[bytes]:
        logger.debug("Opening stream", extra={"endpoint": spec.id, "path": path})
        response = await self._t.open_stream(
            path, method=spec.method, params=query or None, headers=headers
        )
        try:
            track_rate_limit(response.headers, rate_limit)
            if not 200 <= response.status < 300:
                raise_for_status(
                    HTTPResponse(
                        status=response.status,
                        headers=response.headers,
                        body=await response.read(),
                        reason=response.reason,
                    )
                )
            async for chunk in response.iter_chunks():
                yield chunk
        finally:
            response.close()
            logger.debug("Stream connection released", extra={"endpoint": spec.id})
