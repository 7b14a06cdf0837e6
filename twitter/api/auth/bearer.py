"""App-only bearer token authentication."""

from __future__ import annotations

from ..core.exceptions import AuthError
from .base import AuthProvider


class BearerToken(AuthProvider):
    """Static app-only bearer token."""

    def __init__(self, token: str) -> None:
        self._token = token.strip() if token else ""

    async def get_auth_header(self) -> dict[str, str]:
        if not self._token:
            raise AuthError("Bearer token is missing")
        return {"Authorization": f"Bearer {self._token}"}

    def __repr__(self) -> str:
        return "BearerToken(token=***)"
