from __future__ import annotations

import json

import httpx
import pytest

from gotrue_cli import config, http
from gotrue_client import GoTrueClient
from gotrue_client.config_types import ENV_ACCESS_TOKEN, ENV_BASE_URL


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    monkeypatch.delenv(ENV_BASE_URL, raising=False)
    monkeypatch.delenv(ENV_ACCESS_TOKEN, raising=False)
    return tmp_path


class FakeServer:
    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, object]] = {}
        self.requests: list[httpx.Request] = []
        self.error: Exception | None = None

    def on(self, method: str, path: str, status: int, body=None) -> None:
        self.routes[(method, path)] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        status, body = self.routes.get((request.method, request.url.path), (404, {"msg": "not found"}))
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    def json_of(self, request: httpx.Request):
        return json.loads(request.content.decode("utf-8"))


@pytest.fixture
def server(monkeypatch) -> FakeServer:
    fake = FakeServer()

    def _client(cfg):
        return GoTrueClient(cfg, transport=httpx.MockTransport(fake.handler))

    monkeypatch.setattr(http, "GoTrueClient", _client)
    return fake
