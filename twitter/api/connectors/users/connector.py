"""Users endpoint group."""

from __future__ import annotations

from typing import Any

from twitter.api.models import ResponseEnvelope, User
from twitter.api.runtime.rest import (
    EnvelopeAdapter,
    Paginator,
    RateLimitObserver,
    RestRunner,
)

from . import endpoints


class Users:
    """User lookup and follows endpoints."""

    def __init__(self, runner: RestRunner) -> None:
        self._runner = runner

    async def find_user_by_id(
        self, user_id: str, *, rate_limit: RateLimitObserver | None = None, **options: Any
    ) -> ResponseEnvelope[User]:
        return await self._runner.run(
            spec=endpoints.FIND_USER_BY_ID,
            adapter=EnvelopeAdapter(User),
            params={"id": user_id, "query": options},
            rate_limit=rate_limit,
        )

    async def find_user_by_username(
        self, username: str, *, rate_limit: RateLimitObserver | None = None, **options: Any
    ) -> ResponseEnvelope[User]:
        return await self._runner.run(
            spec=endpoints.FIND_USER_BY_USERNAME,
            adapter=EnvelopeAdapter(User),
            params={"username": username, "query": options},
            rate_limit=rate_limit,
        )

    async def find_my_user(
        self, *, rate_limit: RateLimitObserver | None = None, **options: Any
    ) -> ResponseEnvelope[User]:
        """The authenticating user. Requires a user-context credential."""
        return await self._runner.run(
            spec=endpoints.FIND_MY_USER,
            adapter=EnvelopeAdapter(User),
            params={"query": options},
            rate_limit=rate_limit,
        )

    def users_id_followers(
        self, user_id: str, *, rate_limit: RateLimitObserver | None = None, **options: Any
    ) -> Paginator[list[User]]:
        """Followers of a user, one page per ``max_results`` (up to 1000)."""
        return self._runner.paginate(
            spec=endpoints.USERS_ID_FOLLOWERS,
            adapter=EnvelopeAdapter(list[User]),
            params={"id": user_id, "query": options},
            rate_limit=rate_limit,
        )

    def users_id_following(
        self, user_id: str, *, rate_limit: RateLimitObserver | None = None, **options: Any
    ) -> Paginator[list[User]]:
        """Accounts a user follows."""
        return self._runner.paginate(
            spec=endpoints.USERS_ID_FOLLOWING,
            adapter=EnvelopeAdapter(list[User]),
            params={"id": user_id, "query": options},
            rate_limit=rate_limit,
        )
