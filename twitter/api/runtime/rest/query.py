"""Query-string encoding for endpoint options."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any
from urllib.parse import quote


def option_name(key: str) -> str:
    """Map a Python keyword to its wire name (``tweet_fields`` -> ``tweet.fields``)."""
    if key.endswith("_fields"):
        return f"{key[: -len('_fields')]}.fields"
    return key


def encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value.strftime("%Y-%m-%dT%H:%M:%SZ")
    if isinstance(value, (set, frozenset)):
        return ",".join(sorted(str(v) for v in value))
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def build_query(options: Mapping[str, Any] | None) -> dict[str, str]:
    """Encode endpoint options as query parameters.

    None values are dropped, sequences are comma-joined, datetimes are
    formatted as RFC 3339 UTC and booleans are lower-cased.

    Examples:
        >>> build_query({"tweet_fields": ["created_at", "lang"], "max_results": 10})
        {'tweet.fields': 'created_at,lang', 'max_results': '10'}
    """
    if not options:
        return {}
    return {
        option_name(key): encode_value(value)
        for key, value in options.items()
        if value is not None
    }


def path_segment(value: Any) -> str:
    """Percent-encode a value for use as one path segment."""
    return quote(str(value), safe="")
