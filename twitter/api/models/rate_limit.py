"""Rate-limit window model."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from ..config import RATE_LIMIT_HEADERS


class RateLimit(BaseModel):
    """Request quota reported by one response.

    ``reset`` is the end of the current window in epoch milliseconds.
    """

    limit: int = Field(..., ge=0)
    remaining: int = Field(..., ge=0)
    reset: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def reset_at(self) -> datetime:
        """Window reset time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.reset / 1000, tz=UTC)

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> RateLimit | None:
        """Build from ``x-rate-limit-*`` headers, returning None if any is absent.

        Header names are matched case-insensitively. The reset header carries
        epoch seconds and is normalized to milliseconds.

        Raises:
            ValueError: If a header is present but not a non-negative integer
        """
        lowered = {str(k).lower(): v for k, v in headers.items()}
        raw_limit, raw_remaining, raw_reset = (lowered.get(name) for name in RATE_LIMIT_HEADERS)
        if raw_limit is None or raw_remaining is None or raw_reset is None:
            return None
        return cls(
            limit=int(raw_limit.strip()),
            remaining=int(raw_remaining.strip()),
            reset=int(raw_reset.strip()) * 1000,
        )
