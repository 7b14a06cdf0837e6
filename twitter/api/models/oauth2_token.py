"""OAuth 2.0 token model."""

from __future__ import annotations

import time
from typing import Any

from pydantic import BaseModel, ConfigDict


class OAuth2Token(BaseModel):
    """Access token issued by the OAuth 2.0 token endpoint.

    ``expires_at`` is an epoch-milliseconds timestamp derived from the
    endpoint's ``expires_in`` (seconds) at the time the token was received.
    """

    access_token: str
    token_type: str = "bearer"
    expires_at: int | None = None
    refresh_token: str | None = None
    scope: str | None = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_token_response(cls, payload: dict[str, Any]) -> OAuth2Token:
        expires_in = payload.get("expires_in")
        expires_at = None
        if expires_in is not None:
            expires_at = int(time.time() * 1000) + int(expires_in) * 1000
        return cls(
            access_token=payload["access_token"],
            token_type=payload.get("token_type", "bearer"),
            expires_at=expires_at,
            refresh_token=payload.get("refresh_token"),
            scope=payload.get("scope"),
        )

    def is_expired(self, now_ms: int | None = None) -> bool:
        if self.expires_at is None:
            return False
        if now_ms is None:
            now_ms = int(time.time() * 1000)
        return now_ms >= self.expires_at
