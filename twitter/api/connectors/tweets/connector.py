"""Tweets endpoint group.

Every method takes its path values positionally, arbitrary query options as
keyword arguments (``tweet_fields=["created_at"]`` is sent as
``tweet.fields=created_at``) and an optional ``rate_limit`` observer.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from twitter.api.models import ResponseEnvelope, StreamRule, Tweet
from twitter.api.runtime.rest import (
    EnvelopeAdapter,
    Paginator,
    RateLimitObserver,
    RestRunner,
)
from twitter.api.runtime.stream import StreamDecoder

from . import endpoints


class Tweets:
    """Tweet lookup, manage, search and stream endpoints."""

    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def find_tweet_by_id(
        self, tweet_id: str, *, rate_limit: RateLimitObserver | None = None, **options: Any
    ) -> ResponseEnvelope[Tweet]:
        """Look up one Tweet by id."""
        return await self._runner.run(
            spec=endpoints.FIND_TWEET_BY_ID,
            adapter=EnvelopeAdapter(Tweet),
            params={"id": tweet_id, "query": options},
            rate_limit=rate_limit,
        )

    async def find_tweets_by_id(
        self,
        ids: Sequence[str],
        *,
        rate_limit: RateLimitObserver | None = None,
        **options: Any,
    ) -> ResponseEnvelope[list[Tweet]]:
        """Look up several Tweets. Missing ones are reported in ``errors``."""
        return await self._runner.run(
            spec=endpoints.FIND_TWEETS_BY_ID,
            adapter=EnvelopeAdapter(list[Tweet]),
            params={"query": {"ids": list(ids), **options}},
            rate_limit=rate_limit,
        )

    async def create_tweet(
        self, body: dict[str, Any], *, rate_limit: RateLimitObserver | None = None
    ) -> ResponseEnvelope[Tweet]:
        """Post a Tweet, e.g. ``create_tweet({"text": "hello"})``."""
        return await self._runner.run(
            spec=endpoints.CREATE_TWEET,
            adapter=EnvelopeAdapter(Tweet),
            params={"body": body},
            rate_limit=rate_limit,
        )

    async def delete_tweet_by_id(
        self, tweet_id: str, *, rate_limit: RateLimitObserver | None = None
    ) -> ResponseEnvelope[dict[str, Any]]:
        return await self._runner.run(
            spec=endpoints.DELETE_TWEET_BY_ID,
            adapter=EnvelopeAdapter(dict[str, Any]),
            params={"id": tweet_id},
            rate_limit=rate_limit,
        )

    def tweets_recent_search(
        self, query: str, *, rate_limit: RateLimitObserver | None = None, **options: Any
    ) -> Paginator[list[Tweet]]:
        """Search the last seven days. Await for one page or iterate for all."""
        return self._runner.paginate(
            spec=endpoints.TWEETS_RECENT_SEARCH,
            adapter=EnvelopeAdapter(list[Tweet]),
            params={"query": {"query": query, **options}},
            rate_limit=rate_limit,
        )

    def sample_stream(
        self, *, rate_limit: RateLimitObserver | None = None, **options: Any
    ) -> StreamDecoder:
        """Stream a ~1% sample of public Tweets as decoded JSON objects."""
        return self._runner.stream(
            spec=endpoints.SAMPLE_STREAM,
            params={"query": options},
            rate_limit=rate_limit,
        )

    def search_stream(
        self, *, rate_limit: RateLimitObserver | None = None, **options: Any
    ) -> StreamDecoder:
        """Stream Tweets matching the active filtered-stream rules."""
        return self._runner.stream(
            spec=endpoints.SEARCH_STREAM,
            params={"query": options},
            rate_limit=rate_limit,
        )

    async def get_rules(
        self, *, rate_limit: RateLimitObserver | None = None, **options: Any
    ) -> ResponseEnvelope[list[StreamRule]]:
        return await self._runner.run(
            spec=endpoints.GET_RULES,
            adapter=EnvelopeAdapter(list[StreamRule]),
            params={"query": options},
            rate_limit=rate_limit,
        )

    async def add_or_delete_rules(
        self,
        body: dict[str, Any],
        *,
        dry_run: bool | None = None,
        rate_limit: RateLimitObserver | None = None,
    ) -> ResponseEnvelope[list[StreamRule]]:
        """Add (``{"add": [...]}``) or delete (``{"delete": {"ids": [...]}}``) rules."""
        return await self._runner.run(
            spec=endpoints.ADD_OR_DELETE_RULES,
            adapter=EnvelopeAdapter(list[StreamRule]),
            params={"query": {"dry_run": dry_run}, "body": body},
            rate_limit=rate_limit,
        )
