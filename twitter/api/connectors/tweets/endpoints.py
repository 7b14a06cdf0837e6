"""Tweet endpoint specifications.

Params convention: path values under their own keys (``id``), query options
under ``"query"`` and the JSON body under ``"body"``.
"""

from __future__ import annotations

from typing import Any

from twitter.api.runtime.rest import RestEndpointSpec, build_query, path_segment


def _query(params: dict[str, Any]) -> dict[str, str]:
    return build_query(params.get("query"))


def _body(params: dict[str, Any]) -> Any:
    return params.get("body")


FIND_TWEET_BY_ID = RestEndpointSpec(
    id="find_tweet_by_id",
    method="GET",
    build_path=lambda p: f"/2/tweets/{path_segment(p['id'])}",
    build_query=_query,
)

FIND_TWEETS_BY_ID = RestEndpointSpec(
    id="find_tweets_by_id",
    method="GET",
    build_path=lambda p: "/2/tweets",
    build_query=_query,
)

CREATE_TWEET = RestEndpointSpec(
    id="create_tweet",
    method="POST",
    build_path=lambda p: "/2/tweets",
    build_body=_body,
)

DELETE_TWEET_BY_ID = RestEndpointSpec(
    id="delete_tweet_by_id",
    method="DELETE",
    build_path=lambda p: f"/2/tweets/{path_segment(p['id'])}",
)

# Search pages are continued with "next_token", not "pagination_token"
TWEETS_RECENT_SEARCH = RestEndpointSpec(
    id="tweets_recent_search",
    method="GET",
    build_path=lambda p: "/2/tweets/search/recent",
    build_query=_query,
    cursor_param="next_token",
)

SAMPLE_STREAM = RestEndpointSpec(
    id="sample_stream",
    method="GET",
    build_path=lambda p: "/2/tweets/sample/stream",
    build_query=_query,
)

SEARCH_STREAM = RestEndpointSpec(
    id="search_stream",
    method="GET",
    build_path=lambda p: "/2/tweets/search/stream",
    build_query=_query,
)

GET_RULES = RestEndpointSpec(
    id="get_rules",
    method="GET",
    build_path=lambda p: "/2/tweets/search/stream/rules",
    build_query=_query,
)

ADD_OR_DELETE_RULES = RestEndpointSpec(
    id="add_or_delete_rules",
    method="POST",
    build_path=lambda p: "/2/tweets/search/stream/rules",
    build_query=_query,
    build_body=_body,
)
