"""HTTP client helper."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping
from dataclasses import dataclass, field
from typing import Any

import aiohttp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HTTPResponse:
    """Fully buffered response."""

    status: int
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    reason: str = ""
    url: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class StreamingResponse:
    """Open response whose body is read incrementally.

    The connection stays open until :meth:`close` is called.
    """

    def __init__(self, response: aiohttp.ClientResponse) -> None:
        self._response = response
        self.status = response.status
        self.headers: Mapping[str, str] = response.headers
        self.reason = response.reason or ""

    def iter_chunks(self) -> AsyncIterator[bytes]:
        """Yield body chunks as they arrive, whatever their size."""
        return self._response.content.iter_any()

    async def read(self) -> bytes:
        return await self._response.read()

    def close(self) -> None:
        # close() rather than release(): an unfinished stream must not go back to the pool
        self._response.close()


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        # Streams have no total deadline and wait indefinitely between chunks
        self.stream_timeout = aiohttp.ClientTimeout(total=None, sock_connect=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def _url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
        json: Any = None,
        data: Any = None,
    ) -> HTTPResponse:
        """Send a request and buffer the whole response body.

        Non-2xx statuses are returned, not raised; status evaluation belongs
        to the caller.
        """
        url = self._url(url)
        logger.debug("Sending request", extra={"method": method, "url": url})
        async with self.session.request(
            method, url, params=params, headers=headers, json=json, data=data
        ) as response:
            body = await response.read()
            return HTTPResponse(
                status=response.status,
                headers=response.headers,
                body=body,
                reason=response.reason or "",
                url=str(response.url),
            )

    async def open_stream(
        self,
        method: str,
        url: str,
        *,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> StreamingResponse:
        """Open a streaming response. The caller must close it."""
        url = self._url(url)
        logger.debug("Opening stream", extra={"method": method, "url": url})
        response = await self.session.request(
            method, url, params=params, headers=headers, timeout=self.stream_timeout
        )
        return StreamingResponse(response)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
