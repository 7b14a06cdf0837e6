"""Unit tests for endpoint groups and their specs."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from twitter.api.connectors import Tweets, Users
from twitter.api.connectors.tweets import endpoints as tweet_endpoints
from twitter.api.connectors.users import endpoints as user_endpoints
from twitter.api.models import StreamRule
from twitter.api.runtime.rest import HTTPResponse, RestRunner, RESTTransport


@pytest.fixture
def transport():
    transport = MagicMock(spec=RESTTransport)
    transport.request = AsyncMock(return_value=HTTPResponse(status=200, body=b'{"data":[]}'))
    return transport


@pytest.fixture
def tweets(transport):
    return Tweets(RestRunner(transport))


@pytest.fixture
def users(transport):
    return Users(RestRunner(transport))


class TestEndpointSpecs:
    """Test path and cursor configuration."""

    @pytest.mark.parametrize(
        "spec,params,path",
        [
            (tweet_endpoints.FIND_TWEET_BY_ID, {"id": "20"}, "/2/tweets/20"),
            (tweet_endpoints.FIND_TWEETS_BY_ID, {}, "/2/tweets"),
            (tweet_endpoints.TWEETS_RECENT_SEARCH, {}, "/2/tweets/search/recent"),
            (tweet_endpoints.SAMPLE_STREAM, {}, "/2/tweets/sample/stream"),
            (tweet_endpoints.SEARCH_STREAM, {}, "/2/tweets/search/stream"),
            (tweet_endpoints.GET_RULES, {}, "/2/tweets/search/stream/rules"),
            (user_endpoints.FIND_USER_BY_ID, {"id": "12"}, "/2/users/12"),
            (
                user_endpoints.FIND_USER_BY_USERNAME,
                {"username": "TwitterDev"},
                "/2/users/by/username/TwitterDev",
            ),
            (user_endpoints.FIND_MY_USER, {}, "/2/users/me"),
            (user_endpoints.USERS_ID_FOLLOWERS, {"id": "12"}, "/2/users/12/followers"),
            (user_endpoints.USERS_ID_FOLLOWING, {"id": "12"}, "/2/users/12/following"),
        ],
    )
    def test_paths(self, spec, params, path):
        assert spec.build_path(params) == path

    def test_search_continues_with_next_token(self):
        assert tweet_endpoints.TWEETS_RECENT_SEARCH.cursor_param == "next_token"

    def test_list_endpoints_continue_with_pagination_token(self):
        assert user_endpoints.USERS_ID_FOLLOWERS.cursor_param == "pagination_token"
        assert user_endpoints.USERS_ID_FOLLOWING.cursor_param == "pagination_token"

    def test_path_values_are_escaped(self):
        assert tweet_endpoints.FIND_TWEET_BY_ID.build_path({"id": "../x"}) == "/2/tweets/..%2Fx"


class TestTweets:
    """Test Tweets method wiring."""

    @pytest.mark.asyncio
    async def test_create_tweet(self, tweets, transport):
        transport.request.return_value = HTTPResponse(
            status=201, body=b'{"data":{"id":"1","text":"hello"}}'
        )

        envelope = await tweets.create_tweet({"text": "hello"})

        assert envelope.data.text == "hello"
        transport.request.assert_called_once_with(
            "POST", "/2/tweets", params=None, json_body={"text": "hello"}, headers=None
        )

    @pytest.mark.asyncio
    async def test_delete_tweet(self, tweets, transport):
        transport.request.return_value = HTTPResponse(
            status=200, body=b'{"data":{"deleted":true}}'
        )

        envelope = await tweets.delete_tweet_by_id("1")

        assert envelope.data == {"deleted": True}
        assert transport.request.call_args.args == ("DELETE", "/2/tweets/1")

    @pytest.mark.asyncio
    async def test_add_or_delete_rules_dry_run(self, tweets, transport):
        """Test dry_run is sent as a query flag alongside the body."""
        body = {"add": [{"value": "cat has:images", "tag": "cats"}]}
        transport.request.return_value = HTTPResponse(
            status=201,
            body=json.dumps(
                {"data": [{"id": "1", "value": "cat has:images", "tag": "cats"}]}
            ).encode(),
        )

        envelope = await tweets.add_or_delete_rules(body, dry_run=True)

        assert envelope.data == [StreamRule(id="1", value="cat has:images", tag="cats")]
        transport.request.assert_called_once_with(
            "POST",
            "/2/tweets/search/stream/rules",
            params={"dry_run": "true"},
            json_body=body,
            headers=None,
        )

    @pytest.mark.asyncio
    async def test_add_or_delete_rules_without_dry_run(self, tweets, transport):
        await tweets.add_or_delete_rules({"delete": {"ids": ["1"]}})

        assert transport.request.call_args.kwargs["params"] is None

    @pytest.mark.asyncio
    async def test_search_stream_opens_filtered_stream(self, tweets, transport):
        response = MagicMock()
        response.status = 200
        response.headers = {}

        async def chunks():
            yield b'{"data":{"id":"1"},"matching_rules":[{"id":"9","tag":"cats"}]}\r\n'

        response.iter_chunks = MagicMock(return_value=chunks())
        transport.open_stream = AsyncMock(return_value=response)

        items = [item async for item in tweets.search_stream()]

        assert items[0]["matching_rules"][0]["tag"] == "cats"
        transport.open_stream.assert_awaited_once_with(
            "/2/tweets/search/stream", method="GET", params=None, headers=None
        )
        response.close.assert_called_once()


class TestUsers:
    """Test Users method wiring."""

    @pytest.mark.asyncio
    async def test_find_user_by_username_maps_fields(self, users, transport):
        transport.request.return_value = HTTPResponse(
            status=200,
            body=b'{"data":{"id":"2244994945","name":"Developers","username":"TwitterDev"}}',
        )

        envelope = await users.find_user_by_username(
            "TwitterDev", user_fields=["created_at", "verified"]
        )

        assert envelope.data.username == "TwitterDev"
        transport.request.assert_called_once_with(
            "GET",
            "/2/users/by/username/TwitterDev",
            params={"user.fields": "created_at,verified"},
            json_body=None,
            headers=None,
        )

    @pytest.mark.asyncio
    async def test_following_paginates(self, users, transport):
        transport.request.side_effect = [
            HTTPResponse(status=200, body=b'{"data":[],"meta":{"next_token":"N"}}'),
            HTTPResponse(status=200, body=b'{"meta":{"result_count":0}}'),
        ]

        pages = [page async for page in users.users_id_following("12")]

        assert len(pages) == 2
        assert pages[1].data is None
        assert transport.request.call_args_list[1].kwargs["params"] == {"pagination_token": "N"}
