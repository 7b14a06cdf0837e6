"""Rate-limit bookkeeping for responses."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping

from ...models import RateLimit

logger = logging.getLogger(__name__)

RateLimitObserver = Callable[[RateLimit], None]


def track_rate_limit(
    headers: Mapping[str, str], observer: RateLimitObserver | None = None
) -> RateLimit | None:
    """Parse the rate-limit headers of one response and notify the observer.

    The observer is called synchronously, at most once, and only when all
    three ``x-rate-limit-*`` headers are present and well formed. Missing
    headers are not an error.

    Returns:
        The parsed RateLimit, or None when the headers are absent or malformed
    """
    try:
        rate_limit = RateLimit.from_headers(headers)
    except ValueError:
        logger.warning("Ignoring malformed rate-limit headers", exc_info=True)
        return None
    if rate_limit is None:
        return None

    logger.debug(
        "Rate limit",
        extra={
            "limit": rate_limit.limit,
            "remaining": rate_limit.remaining,
            "reset": rate_limit.reset,
        },
    )
    if observer is not None:
        observer(rate_limit)
    return rate_limit
