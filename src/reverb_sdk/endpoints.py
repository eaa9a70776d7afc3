"""Wrappers for the API root and arbitrary endpoints."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .config import RequestProfile
from .transport.base import HttpClient, HttpResponse
from .urls import QueryValue, build_url


async def get_my_root(http_client: HttpClient, profile: RequestProfile) -> HttpResponse:
    return await http_client.get(build_url(profile.base_endpoint, "/"), headers=dict(profile.headers))


async def get_arbitrary_endpoint(
    http_client: HttpClient,
    profile: RequestProfile,
    url: str,
    params: Optional[Mapping[str, QueryValue]] = None,
    **config: Any,
) -> HttpResponse:
    """GET any path under the base endpoint, or an absolute URL as-is.

    Extra keyword arguments are passed to the transport with the request,
    after the profile headers.
    """
    request_config: dict = {"headers": dict(profile.headers)}
    if params is not None:
        request_config["params"] = dict(params)
    request_config.update(config)
    return await http_client.get(build_url(profile.base_endpoint, url), **request_config)


__all__ = ["get_arbitrary_endpoint", "get_my_root"]
