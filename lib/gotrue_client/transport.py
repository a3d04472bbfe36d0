from __future__ import annotations

import logging
from typing import Any

import httpx

from . import __version__
from .config_types import ClientConfig
from .errors import NetworkError
from .responses import RawResponse

logger = logging.getLogger(__name__)


class Transport:
    def __init__(self, cfg: ClientConfig, *, transport: httpx.BaseTransport | None = None):
        self._cfg = cfg
        user_agent = f"gotrue-client/{__version__}"
        if cfg.client_version:
            user_agent = f"{user_agent} gotrue-cli/{cfg.client_version}"
        self._client = httpx.Client(
            base_url=cfg.base_url.rstrip("/"),
            timeout=cfg.timeout_s,
            headers={"User-Agent": user_agent},
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._cfg.base_url.rstrip("/")

    def close(self) -> None:
        self._client.close()

    def request(
            self,
            method: str,
            path: str,
            *,
            params: dict[str, Any] | None = None,
            json_body: Any | None = None,
            token: str | None = None,
    ) -> RawResponse:
        access_token = token if token is not None else self._cfg.access_token
        # sent even when empty: the service sees "Bearer " rather than no header
        headers = {"Authorization": f"Bearer {access_token or ''}"}

        logger.debug("%s %s", method, path)
        try:
            r = self._client.request(method, path, params=params, json=json_body, headers=headers)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e
        logger.debug("%s %s -> %s", method, path, r.status_code)

        return RawResponse(status=r.status_code, body=_decode_body(r))


def _decode_body(r: httpx.Response) -> Any:
    if not r.content:
        return None
    try:
        return r.json()
    except ValueError:
        return r.text
