from __future__ import annotations

from typing import Any, Mapping
from urllib.parse import urlencode

import httpx

from .config_types import ClientConfig
from .models import Credentials, Invitation, User
from .responses import body_handler, normalize, user_handler
from .results import Result
from .transport import Transport


class GoTrueClient:
    """Client for a GoTrue authentication server.

    Every operation returns a :class:`~gotrue_client.results.Result`: ``Ok`` when
    the server answered with the status the endpoint succeeds with, ``Err``
    carrying a :class:`~gotrue_client.results.ServiceError` otherwise.
    Network failures raise :class:`~gotrue_client.errors.NetworkError`.
    """

    def __init__(self, cfg: ClientConfig | None = None, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg or ClientConfig()
        self._t = Transport(self._cfg, transport=transport)

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> "GoTrueClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def settings(self) -> Result[dict[str, Any]]:
        """Get environment settings for the server."""
        raw = self._t.request("GET", "/settings")
        return normalize(raw, 200, body_handler)

    def sign_up(self, credentials: Credentials | Mapping[str, Any]) -> Result[dict[str, Any]]:
        """Sign up a new user with email and password."""
        payload = Credentials.coerce(credentials).to_signup_payload()
        raw = self._t.request("POST", "/signup", json_body=payload)
        return normalize(raw, 200, body_handler)

    def sign_in(self, credentials: Credentials | Mapping[str, Any]) -> Result[dict[str, Any]]:
        """Sign in with email and password."""
        return self._grant_token("password", Credentials.coerce(credentials).to_token_payload())

    def refresh_access_token(self, refresh_token: str) -> Result[dict[str, Any]]:
        """Exchange a refresh token for a new access token."""
        return self._grant_token("refresh_token", {"refresh_token": refresh_token})

    def _grant_token(self, grant_type: str, payload: dict[str, Any]) -> Result[dict[str, Any]]:
        raw = self._t.request("POST", "/token", params={"grant_type": grant_type}, json_body=payload)
        return normalize(raw, 200, body_handler)

    def recover(self, email: str) -> Result[None]:
        """Send a password recovery email."""
        raw = self._t.request("POST", "/recover", json_body={"email": email})
        return normalize(raw)

    def invite(self, invitation: Invitation | Mapping[str, Any]) -> Result[User]:
        """Invite a new user to join."""
        payload = Invitation.coerce(invitation).to_payload()
        raw = self._t.request("POST", "/invite", json_body=payload)
        return normalize(raw, 200, user_handler)

    def send_magic_link(self, email: str) -> Result[None]:
        """Send a magic link for passwordless login."""
        raw = self._t.request("POST", "/magiclink", json_body={"email": email})
        return normalize(raw)

    def url_for_provider(self, provider: str) -> str:
        """Build the URL that starts an OAuth2 login with ``provider``."""
        return f"{self._t.base_url}/authorize?{urlencode({'provider': provider})}"

    def sign_out(self, jwt: str) -> Result[None]:
        """Sign out the user owning ``jwt``. The server answers 204 on success."""
        raw = self._t.request("POST", "/logout", json_body={}, token=jwt)
        return normalize(raw, 204)

    def get_user(self, jwt: str) -> Result[User]:
        raw = self._t.request("GET", "/user", token=jwt)
        return normalize(raw, 200, user_handler)

    def update_user(self, jwt: str, info: Mapping[str, Any]) -> Result[User]:
        raw = self._t.request("PUT", "/user", json_body=dict(info), token=jwt)
        return normalize(raw, 200, user_handler)
