"""httpx-backed transport used by default."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from ..errors import TransportError
from .base import HttpClient, HttpResponse

logger = logging.getLogger("reverb_sdk.transport")

# options forwarded to httpx.AsyncClient.request as-is
_PASSTHROUGH = ("cookies", "auth", "follow_redirects", "extensions")

DEFAULT_TIMEOUT = 30.0


class HttpxClient(HttpClient):
    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Wrap ``client``, or build and own a new ``httpx.AsyncClient``.

        ``timeout`` and ``transport`` configure the client built here and
        cannot be combined with an injected ``client``.
        """
        if client is not None and (timeout is not None or transport is not None):
            raise TypeError("timeout and transport cannot be used with an injected client")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=DEFAULT_TIMEOUT if timeout is None else timeout, transport=transport
        )

    async def __aenter__(self) -> "HttpxClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    async def request(self, method: str, url: str, data: Any = None, **config: Any) -> HttpResponse:
        kwargs: Dict[str, Any] = {"headers": config.get("headers")}
        params = config.get("params")
        if params:
            kwargs["params"] = {key: value for key, value in params.items() if value is not None}
        if config.get("timeout") is not None:
            kwargs["timeout"] = config["timeout"]
        for key in _PASSTHROUGH:
            if key in config:
                kwargs[key] = config[key]
        if isinstance(data, (str, bytes)):
            kwargs["content"] = data
        elif data is not None:
            kwargs["json"] = data

        logger.debug("%s %s", method, url)
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.RequestError as exc:
            logger.error("Request failed method=%s url=%s error=%s", method, url, exc)
            raise TransportError(str(exc) or type(exc).__name__, is_network_error=True, request_config=config) from exc

        envelope = self._to_envelope(response, config)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error("Request failed status=%s body=%s", response.status_code, response.text)
            raise TransportError(
                str(exc),
                status_code=response.status_code,
                response=envelope,
                request_config=config,
            ) from exc
        return envelope

    @staticmethod
    def _to_envelope(response: httpx.Response, config: Dict[str, Any]) -> HttpResponse:
        content_type = response.headers.get("content-type", "")
        if not response.content:
            data: Any = None
        elif "json" in content_type:
            try:
                data = response.json()
            except ValueError:
                # proxies and gateways sometimes label HTML error pages as JSON
                data = response.text
        else:
            data = response.text
        return HttpResponse(
            data=data,
            status_code=response.status_code,
            status_text=response.reason_phrase,
            headers=dict(response.headers),
            request_config=dict(config),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


__all__ = ["HttpxClient"]
