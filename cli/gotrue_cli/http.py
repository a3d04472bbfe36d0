from __future__ import annotations

import json
from typing import Any, Callable, TypeVar

import typer

from gotrue_client import Err, GoTrueClient, NetworkError, Result
from gotrue_client.config_types import ClientConfig

from . import console
from .config import AppConfig, apply_profile, resolve_access_token, resolve_base_url

CLI_VERSION = "0.1.0"

T = TypeVar("T")


def make_client(
    cfg: AppConfig,
    *,
    profile: str | None,
    base_url_override: str | None,
) -> GoTrueClient:
    effective_cfg = apply_profile(cfg, profile)
    base_url = resolve_base_url(effective_cfg, base_url_override)
    token = resolve_access_token(effective_cfg)
    return GoTrueClient(
        ClientConfig(
            base_url=base_url,
            access_token=token,
            client_version=CLI_VERSION,
        )
    )


def call(client: GoTrueClient, action: str, fn: Callable[[GoTrueClient], Result[T]]) -> T:
    """Run one operation, turning failures into a CLI exit.

    Service errors exit with code 2, network errors with code 1. The client is
    closed in every case.
    """
    try:
        result = fn(client)
    except NetworkError as e:
        console.err(f"{action} failed: cannot reach server: {e}")
        raise typer.Exit(code=1)
    finally:
        client.close()

    if isinstance(result, Err):
        console.err(f"{action} failed: {result.error.describe()}")
        raise typer.Exit(code=2)
    return result.value


def require_token(ctx: typer.Context, cfg: AppConfig, token: str | None) -> str:
    value = (token or "").strip() or resolve_access_token(apply_profile(cfg, _options(ctx).get("profile")))
    if not value:
        console.err("No access token. Run: gotrue auth login")
        raise typer.Exit(code=2)
    return value


def token_fields(payload: Any) -> tuple[str, str]:
    if not isinstance(payload, dict):
        return "", ""
    return str(payload.get("access_token") or ""), str(payload.get("refresh_token") or "")


def _options(ctx: typer.Context) -> dict[str, Any]:
    return ctx.obj if isinstance(ctx.obj, dict) else {}


def client_for(ctx: typer.Context, cfg: AppConfig) -> GoTrueClient:
    opts = _options(ctx)
    return make_client(cfg, profile=opts.get("profile"), base_url_override=opts.get("base_url"))


def parse_data_option(raw: str | None) -> dict[str, Any] | None:
    if raw is None:
        return None
    try:
        data = json.loads(raw)
    except ValueError as e:
        console.err(f"--data must be a JSON object: {e}")
        raise typer.Exit(code=2)
    if not isinstance(data, dict):
        console.err("--data must be a JSON object.")
        raise typer.Exit(code=2)
    return data
