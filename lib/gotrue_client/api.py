"""Module-level operations bound to a process-wide default client.

The default client is built once, on first use, from ``GOTRUE_BASE_URL`` and
``GOTRUE_ACCESS_TOKEN``.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping

from .client import GoTrueClient
from .config_types import ClientConfig
from .models import Credentials, Invitation, User
from .results import Result


@lru_cache(maxsize=1)
def default_client() -> GoTrueClient:
    return GoTrueClient(ClientConfig.from_env())


def settings() -> Result[dict[str, Any]]:
    return default_client().settings()


def sign_up(credentials: Credentials | Mapping[str, Any]) -> Result[dict[str, Any]]:
    return default_client().sign_up(credentials)


def sign_in(credentials: Credentials | Mapping[str, Any]) -> Result[dict[str, Any]]:
    return default_client().sign_in(credentials)


def refresh_access_token(refresh_token: str) -> Result[dict[str, Any]]:
    return default_client().refresh_access_token(refresh_token)


def recover(email: str) -> Result[None]:
    return default_client().recover(email)


def invite(invitation: Invitation | Mapping[str, Any]) -> Result[User]:
    return default_client().invite(invitation)


def send_magic_link(email: str) -> Result[None]:
    return default_client().send_magic_link(email)


def url_for_provider(provider: str) -> str:
    return default_client().url_for_provider(provider)


def sign_out(jwt: str) -> Result[None]:
    return default_client().sign_out(jwt)


def get_user(jwt: str) -> Result[User]:
    return default_client().get_user(jwt)


def update_user(jwt: str, info: Mapping[str, Any]) -> Result[User]:
    return default_client().update_user(jwt, info)
