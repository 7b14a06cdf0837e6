"""User endpoint specifications."""

from __future__ import annotations

from typing import Any

from twitter.api.runtime.rest import RestEndpointSpec, build_query, path_segment


def _query(params: dict[str, Any]) -> dict[str, str]:
    return build_query(params.get("query"))


FIND_USER_BY_ID = RestEndpointSpec(
    id="find_user_by_id",
    method="GET",
    build_path=lambda p: f"/2/users/{path_segment(p['id'])}",
    build_query=_query,
)

FIND_USER_BY_USERNAME = RestEndpointSpec(
    id="find_user_by_username",
    method="GET",
    build_path=lambda p: f"/2/users/by/username/{path_segment(p['username'])}",
    build_query=_query,
)

FIND_MY_USER = RestEndpointSpec(
    id="find_my_user",
    method="GET",
    build_path=lambda p: "/2/users/me",
    build_query=_query,
)

USERS_ID_FOLLOWERS = RestEndpointSpec(
    id="users_id_followers",
    method="GET",
    build_path=lambda p: f"/2/users/{path_segment(p['id'])}/followers",
    build_query=_query,
)

USERS_ID_FOLLOWING = RestEndpointSpec(
    id="users_id_following",
    method="GET",
    build_path=lambda p: f"/2/users/{path_segment(p['id'])}/following",
    build_query=_query,
)
