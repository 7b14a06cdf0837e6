"""Top-level API client.

Composes the request pipeline (credential injection, rate-limit tracking,
envelope parsing, pagination and stream decoding) and exposes endpoint groups:

    async with Client("bearer-token") as client:
        tweet = await client.tweets.find_tweet_by_id("20")

        async for page in client.users.users_id_followers("2244994945"):
            ...

        async with client.tweets.sample_stream() as stream:
            async for item in stream:
                ...
"""

from __future__ import annotations

from ..auth import AuthProvider, BearerToken
from ..config import BASE_URL, DEFAULT_TIMEOUT, USER_AGENT
from ..connectors import Tweets, Users
from ..runtime.rest import RESTTransport, RestRunner


class Client:
    """Async client for the v2 API.

    Args:
        auth: AuthProvider, or a bearer token string
        base_url: API root
        timeout: Total timeout in seconds for non-streaming requests
        user_agent: Value of the User-Agent header
    """

    def __init__(
        self,
        auth: AuthProvider | str,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = USER_AGENT,
    ) -> None:
        if isinstance(auth, str):
            auth = BearerToken(auth)
        self.auth = auth
        self._transport = RESTTransport(
            base_url, auth=auth, user_agent=user_agent, timeout=timeout
        )
        self._runner = RestRunner(self._transport)
        self.tweets = Tweets(self._runner)
        self.users = Users(self._runner)

    async def close(self) -> None:
        """Close the HTTP session."""
        await self._transport.close()

    async def __aenter__(self) -> Client:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
