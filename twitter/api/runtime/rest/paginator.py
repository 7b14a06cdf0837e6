"""Token-following paginator.

A Paginator is both awaitable and async-iterable:

    first = await client.users.users_id_followers("2244994945")

    async for page in client.users.users_id_followers("2244994945"):
        ...

Awaiting resolves to the first page only. Iterating yields that same first
page, then fetches each following page on demand by passing the previous
page's ``meta.next_token`` back to the endpoint, until a page carries no
token. Pages are fetched strictly one at a time.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Generator
from typing import Any, Generic, TypeVar

from ...models import ResponseEnvelope
from .envelope import parse_envelope, validate_envelope
from .http_client import HTTPResponse
from .rate_limit import RateLimitObserver, track_rate_limit

logger = logging.getLogger(__name__)

T = TypeVar("T")

PageFetcher = Callable[[str | None], Awaitable[HTTPResponse]]


class Paginator(Generic[T]):
    """Lazy, non-restartable sequence of response envelopes.

    Args:
        fetch_page: Sends one page request; receives the continuation token,
            or None for the first page
        rate_limit: Observer notified with the rate-limit window of every page
        parse: Builds the typed envelope from the decoded body
    """

    def __init__(
        self,
        fetch_page: PageFetcher,
        *,
        rate_limit: RateLimitObserver | None = None,
        parse: Callable[[Any], ResponseEnvelope[T]] | None = None,
    ) -> None:
        self._fetch_page = fetch_page
        self._rate_limit = rate_limit
        self._parse = parse or functools.partial(validate_envelope, ResponseEnvelope)
        # The in-flight first fetch is shared so concurrent awaiters send one request
        self._first: asyncio.Task[ResponseEnvelope[T]] | None = None
        self._pages: AsyncIterator[ResponseEnvelope[T]] | None = None
        self.pages_fetched = 0

    async def _fetch(self, token: str | None) -> ResponseEnvelope[T]:
        response = await self._fetch_page(token)
        track_rate_limit(response.headers, self._rate_limit)
        raw = parse_envelope(response)
        page = self._parse(raw if raw is not None else {})
        self.pages_fetched += 1
        logger.debug(
            "Fetched page",
            extra={"page": self.pages_fetched, "has_next": page.next_token is not None},
        )
        return page

    async def first_page(self) -> ResponseEnvelope[T]:
        """Fetch (once) and return the first page."""
        if self._first is None:
            self._first = asyncio.ensure_future(self._fetch(None))
        # A cancelled awaiter must not cancel the fetch other awaiters share
        return await asyncio.shield(self._first)

    def __await__(self) -> Generator[Any, None, ResponseEnvelope[T]]:
        return self.first_page().__await__()

    def __aiter__(self) -> AsyncIterator[ResponseEnvelope[T]]:
        if self._pages is None:
            self._pages = self._iterate()
        return self._pages

    async def _iterate(self) -> AsyncIterator[ResponseEnvelope[T]]:
        page = await self.first_page()
        yield page
        token = page.next_token
        while token:
            page = await self._fetch(token)
            yield page
            token = page.next_token
        logger.debug("Pagination complete", extra={"pages": self.pages_fetched})

    async def aclose(self) -> None:
        """Stop the sequence; no further pages are fetched."""
        pages = self.__aiter__()
        await pages.aclose()  # type: ignore[attr-defined]
