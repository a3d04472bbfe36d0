from __future__ import annotations

import os
import sys
import tomllib
from dataclasses import dataclass, field
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from gotrue_client.config_types import DEFAULT_BASE_URL, ENV_ACCESS_TOKEN, ENV_BASE_URL

from . import console

APP_NAME = "gotrue"
CONFIG_FILENAME = "config.toml"

_WARNED_BASE_URL_SCHEME = False


@dataclass
class AuthConfig:
    access_token: str = ""
    refresh_token: str = ""
    token_type: str = "bearer"


@dataclass
class ProfileConfig:
    base_url: str = ""
    access_token: str = ""


@dataclass
class AppConfig:
    base_url: str
    auth: AuthConfig
    profiles: dict[str, ProfileConfig] = field(default_factory=dict)


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(base_url=DEFAULT_BASE_URL, auth=AuthConfig(), profiles={})


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    if not (sys.stderr.isatty() or sys.stdout.isatty()):
        return
    console.warn(f"base_url missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "base_url": cfg.base_url,
        "auth": {
            "access_token": cfg.auth.access_token,
            "refresh_token": cfg.auth.refresh_token,
            "token_type": cfg.auth.token_type,
        },
        "profiles": {
            name: _prune_empty({"base_url": p.base_url, "access_token": p.access_token})
            for name, p in cfg.profiles.items()
        },
    }


def _prune_empty(value: dict[str, str]) -> dict[str, str]:
    return {k: v for k, v in value.items() if v}


def from_toml(data: dict[str, Any]) -> AppConfig:
    base_url = normalize_base_url(str(data.get("base_url") or ""), warn=True)

    auth_raw = data.get("auth") or {}
    auth = AuthConfig()
    if isinstance(auth_raw, dict):
        auth = AuthConfig(
            access_token=str(auth_raw.get("access_token") or ""),
            refresh_token=str(auth_raw.get("refresh_token") or ""),
            token_type=str(auth_raw.get("token_type") or "bearer"),
        )

    profiles_raw = data.get("profiles") or {}
    profiles: dict[str, ProfileConfig] = {}
    if isinstance(profiles_raw, dict):
        for name, v in profiles_raw.items():
            if not isinstance(v, dict):
                continue
            profiles[str(name)] = ProfileConfig(
                base_url=normalize_base_url(str(v.get("base_url") or ""), warn=True),
                access_token=str(v.get("access_token") or ""),
            )

    return AppConfig(base_url=base_url or DEFAULT_BASE_URL, auth=auth, profiles=profiles)


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def apply_profile(cfg: AppConfig, profile: str | None) -> AppConfig:
    if not profile:
        return cfg
    prof = cfg.profiles.get(profile)
    if prof is None:
        console.warn(f"Unknown profile: {profile}")
        return cfg
    return AppConfig(
        base_url=prof.base_url or cfg.base_url,
        auth=AuthConfig(
            access_token=prof.access_token or cfg.auth.access_token,
            refresh_token=cfg.auth.refresh_token,
            token_type=cfg.auth.token_type,
        ),
        profiles=cfg.profiles,
    )


def resolve_base_url(cfg: AppConfig, override: str | None = None) -> str:
    if override:
        return normalize_base_url(override, warn=True)
    env_value = os.getenv(ENV_BASE_URL, "").strip()
    if env_value:
        return normalize_base_url(env_value, warn=True)
    return cfg.base_url or DEFAULT_BASE_URL


def resolve_access_token(cfg: AppConfig) -> str | None:
    env_value = os.getenv(ENV_ACCESS_TOKEN, "").strip()
    if env_value:
        return env_value
    return cfg.auth.access_token.strip() or None


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
