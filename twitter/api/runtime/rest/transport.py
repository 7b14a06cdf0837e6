"""REST transport: HTTPClient plus credential and user-agent injection."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ...config import DEFAULT_TIMEOUT, USER_AGENT
from .http_client import HTTPClient, HTTPResponse, StreamingResponse

if TYPE_CHECKING:
    from ...auth import AuthProvider


class RESTTransport:
    """Attaches the credential and user agent to every outgoing request."""

    def __init__(
        self,
        base_url: str,
        *,
        auth: AuthProvider | None = None,
        user_agent: str = USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout)
        self._auth = auth
        self._user_agent = user_agent

    async def _headers(self, headers: Mapping[str, str] | None) -> dict[str, str]:
        merged = {"User-Agent": self._user_agent}
        if self._auth is not None:
            # AuthError propagates here, before anything is sent
            merged.update(await self._auth.get_auth_header())
        if headers:
            merged.update(headers)
        return merged

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, str] | None = None,
        json_body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> HTTPResponse:
        return await self._http.request(
            method.upper(),
            path,
            params=params,
            headers=await self._headers(headers),
            json=json_body,
        )

    async def get(
        self,
        path: str,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HTTPResponse:
        return await self.request("GET", path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        json_body: Any = None,
        headers: Mapping[str, str] | None = None,
    ) -> HTTPResponse:
        return await self.request("POST", path, json_body=json_body, headers=headers)

    async def open_stream(
        self,
        path: str,
        *,
        method: str = "GET",
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> StreamingResponse:
        return await self._http.open_stream(
            method.upper(), path, params=params, headers=await self._headers(headers)
        )

    async def close(self) -> None:
        await self._http.close()
