"""Transport interface shared by the production and mock HTTP clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class HttpResponse:
    data: Any
    status_code: int
    status_text: str
    headers: Dict[str, str] = field(default_factory=dict)
    request_config: Dict[str, Any] = field(default_factory=dict)


class HttpClient:
    """Verb-based async HTTP interface.

    ``config`` carries ``headers``, ``params`` and ``timeout`` plus any other
    transport-specific options; implementations echo it back on the
    response as ``request_config``.
    """

    async def request(self, method: str, url: str, data: Any = None, **config: Any) -> HttpResponse:  # pragma: no cover - interface
        raise NotImplementedError

    async def get(self, url: str, **config: Any) -> HttpResponse:
        return await self.request("GET", url, **config)

    async def post(self, url: str, data: Any = None, **config: Any) -> HttpResponse:
        return await self.request("POST", url, data, **config)

    async def put(self, url: str, data: Any = None, **config: Any) -> HttpResponse:
        return await self.request("PUT", url, data, **config)

    async def delete(self, url: str, **config: Any) -> HttpResponse:
        return await self.request("DELETE", url, **config)

    async def patch(self, url: str, data: Any = None, **config: Any) -> HttpResponse:
        return await self.request("PATCH", url, data, **config)

    async def aclose(self) -> None:  # pragma: no cover - optional override
        return None


__all__ = ["HttpClient", "HttpResponse"]
