from __future__ import annotations

import json

import httpx
import pytest

from gotrue_client import ClientConfig, GoTrueClient


class _Recorder:
    """Serves canned responses and remembers what was sent."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status = 200
        self.body = None

    def reply(self, status: int, body=None) -> None:
        self.status = status
        self.body = body

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.body is None:
            return httpx.Response(self.status)
        return httpx.Response(self.status, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content.decode("utf-8"))


@pytest.fixture
def server() -> _Recorder:
    return _Recorder()


@pytest.fixture
def make_gotrue(server):
    clients: list[GoTrueClient] = []

    def _make(**cfg_kwargs) -> GoTrueClient:
        cfg_kwargs.setdefault("base_url", "http://localhost:9999")
        client = GoTrueClient(ClientConfig(**cfg_kwargs), transport=httpx.MockTransport(server.handler))
        clients.append(client)
        return client

    yield _make
    for client in clients:
        client.close()
