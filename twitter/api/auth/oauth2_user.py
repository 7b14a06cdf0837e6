"""OAuth 2.0 user-context authentication (authorization code flow with PKCE).

Flow:
    1. ``generate_auth_url(state)`` and send the user to the returned URL
    2. the platform redirects to ``callback`` with ``?state=...&code=...``
    3. ``await request_access_token(code)``
    4. pass the provider to ``Client``; expired tokens are refreshed on use
       when a refresh token was granted (``offline.access`` scope)
"""

from __future__ import annotations

import asyncio
import base64
import hashlib
import logging
import secrets
from collections.abc import Sequence
from typing import Any, Literal
from urllib.parse import quote, urlencode

import aiohttp

from ..config import AUTHORIZE_URL, DEFAULT_TIMEOUT, REVOKE_URL, TOKEN_URL
from ..core.exceptions import AuthError
from ..models import OAuth2Token
from ..runtime.rest import HTTPClient, parse_envelope
from .base import AuthProvider

logger = logging.getLogger(__name__)

CodeChallengeMethod = Literal["s256", "plain"]


def _s256(verifier: str) -> str:
    digest = hashlib.sha256(verifier.encode("ascii")).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")


class OAuth2User(AuthProvider):
    """User-context OAuth 2.0 credential.

    Args:
        client_id: App client id
        callback: Redirect URI registered for the app
        scopes: Requested scopes, e.g. ["tweet.read", "users.read", "offline.access"]
        client_secret: Set for confidential clients; sent as HTTP Basic auth to
            the token endpoint
        token: Previously obtained token to resume with
        http: HTTP client used for token requests (created if omitted)
    """

    def __init__(
        self,
        client_id: str,
        callback: str,
        scopes: Sequence[str],
        *,
        client_secret: str | None = None,
        token: OAuth2Token | None = None,
        http: HTTPClient | None = None,
    ) -> None:
        self.client_id = client_id
        self.callback = callback
        self.scopes = list(scopes)
        self.token = token
        self._client_secret = client_secret
        self._code_verifier: str | None = None
        self._refresh_lock = asyncio.Lock()
        self._owns_http = http is None
        self._http = http or HTTPClient(timeout=DEFAULT_TIMEOUT)

    def generate_auth_url(
        self,
        state: str,
        code_challenge_method: CodeChallengeMethod = "s256",
        code_challenge: str | None = None,
    ) -> str:
        """Build the authorization URL and remember the PKCE verifier.

        With ``s256`` a random verifier is generated. With ``plain`` the
        caller-supplied ``code_challenge`` doubles as the verifier.
        """
        if code_challenge_method == "plain":
            if not code_challenge:
                raise ValueError("code_challenge is required for the plain method")
            self._code_verifier = code_challenge
            challenge, method = code_challenge, "plain"
        else:
            self._code_verifier = secrets.token_urlsafe(64)
            challenge, method = _s256(self._code_verifier), "S256"

        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.callback,
            "state": state,
            "code_challenge": challenge,
            "code_challenge_method": method,
            "scope": " ".join(self.scopes),
        }
        return f"{AUTHORIZE_URL}?{urlencode(params, quote_via=quote)}"

    def _token_headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/x-www-form-urlencoded"}
        if self._client_secret:
            headers["Authorization"] = aiohttp.BasicAuth(
                self.client_id, self._client_secret
            ).encode()
        return headers

    async def _post_form(self, url: str, form: dict[str, str]) -> Any:
        response = await self._http.request("POST", url, data=form, headers=self._token_headers())
        return parse_envelope(response)

    async def request_access_token(self, code: str) -> OAuth2Token:
        """Exchange an authorization code for a token."""
        if self._code_verifier is None:
            raise AuthError("generate_auth_url must be called before request_access_token")
        payload = await self._post_form(
            TOKEN_URL,
            {
                "code": code,
                "grant_type": "authorization_code",
                "client_id": self.client_id,
                "redirect_uri": self.callback,
                "code_verifier": self._code_verifier,
            },
        )
        self.token = OAuth2Token.from_token_response(payload)
        logger.debug("Access token obtained", extra={"scope": self.token.scope})
        return self.token

    async def refresh_access_token(self) -> OAuth2Token:
        """Trade the refresh token for a new access token."""
        if self.token is None or not self.token.refresh_token:
            raise AuthError("No refresh token available")
        payload = await self._post_form(
            TOKEN_URL,
            {
                "refresh_token": self.token.refresh_token,
                "grant_type": "refresh_token",
                "client_id": self.client_id,
            },
        )
        self.token = OAuth2Token.from_token_response(payload)
        logger.debug("Access token refreshed")
        return self.token

    async def revoke_access_token(self) -> Any:
        """Revoke the current access token and forget it."""
        if self.token is None:
            raise AuthError("No access token to revoke")
        payload = await self._post_form(
            REVOKE_URL,
            {
                "token": self.token.access_token,
                "token_type_hint": "access_token",
                "client_id": self.client_id,
            },
        )
        self.token = None
        return payload

    def is_access_token_expired(self) -> bool:
        return self.token is None or self.token.is_expired()

    async def get_auth_header(self) -> dict[str, str]:
        if self.token is None:
            raise AuthError("No access token; complete the authorization flow first")
        if self.token.is_expired():
            async with self._refresh_lock:
                # Refresh tokens are single-use; another request may have refreshed already
                if self.token.is_expired():
                    if not self.token.refresh_token:
                        raise AuthError("Access token expired and no refresh token is available")
                    await self.refresh_access_token()
        return {"Authorization": f"Bearer {self.token.access_token}"}

    async def close(self) -> None:
        if self._owns_http:
            await self._http.close()
