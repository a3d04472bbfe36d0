from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "http://0.0.0.0:9999"
ENV_BASE_URL = "GOTRUE_BASE_URL"
ENV_ACCESS_TOKEN = "GOTRUE_ACCESS_TOKEN"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    access_token: str | None = None
    timeout_s: float = 15.0
    client_version: str | None = None

    @staticmethod
    def from_env() -> "ClientConfig":
        base_url = os.getenv(ENV_BASE_URL, "").strip() or DEFAULT_BASE_URL
        access_token = os.getenv(ENV_ACCESS_TOKEN, "").strip() or None
        return ClientConfig(base_url=base_url.rstrip("/"), access_token=access_token)
