"""Async Python client for the Reverb marketplace API."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Union

from . import endpoints, listings, orders
from .config import ClientConfiguration, HeaderSet, RequestProfile
from .models import Listing, ListingPostBody, Order
from .pagination import DEFAULT_PER_PAGE
from .transport.base import HttpClient, HttpResponse
from .transport.httpx_client import HttpxClient
from .urls import QueryValue


class ReverbClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        config: Optional[ClientConfiguration] = None,
        http_client: Optional[HttpClient] = None,
        **options: Any,
    ) -> None:
        if config is not None and (api_key is not None or options):
            raise TypeError("pass either config or api_key/options, not both")
        self._config = config or ClientConfiguration(api_key, **options)
        self._owns_http = http_client is None
        self._http = http_client or HttpxClient()

    @classmethod
    def from_env(cls, *, http_client: Optional[HttpClient] = None) -> "ReverbClient":
        return cls(config=ClientConfiguration.from_env(), http_client=http_client)

    async def __aenter__(self) -> "ReverbClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    @property
    def config(self) -> ClientConfiguration:
        return self._config

    @property
    def http_client(self) -> HttpClient:
        return self._http

    @property
    def headers(self) -> HeaderSet:
        return self._config.headers

    @property
    def profile(self) -> RequestProfile:
        return self._config.profile

    @property
    def api_version(self) -> str:
        return self._config.api_version

    @api_version.setter
    def api_version(self, value: str) -> None:
        self._config.api_version = value

    @property
    def display_currency(self) -> str:
        return self._config.display_currency

    @display_currency.setter
    def display_currency(self, value: str) -> None:
        self._config.display_currency = value

    @property
    def shipping_region(self) -> Optional[str]:
        return self._config.shipping_region

    @shipping_region.setter
    def shipping_region(self, value: Optional[str]) -> None:
        self._config.shipping_region = value

    @property
    def locale(self) -> str:
        return self._config.locale

    @locale.setter
    def locale(self, value: str) -> None:
        self._config.locale = value

    @property
    def base_endpoint(self) -> str:
        return self._config.base_endpoint

    @base_endpoint.setter
    def base_endpoint(self, value: str) -> None:
        self._config.base_endpoint = value

    async def get_my_root(self) -> HttpResponse:
        return await endpoints.get_my_root(self._http, self.profile)

    async def get_arbitrary_endpoint(
        self,
        url: str,
        params: Optional[Mapping[str, QueryValue]] = None,
        **config: Any,
    ) -> HttpResponse:
        return await endpoints.get_arbitrary_endpoint(self._http, self.profile, url, params, **config)

    async def get_my_listings(
        self,
        *,
        page: Optional[int] = None,
        per_page: Optional[int] = None,
        query: Optional[str] = None,
        state: Optional[str] = None,
    ) -> HttpResponse:
        return await listings.get_my_listings(
            self._http, self.profile, page=page, per_page=per_page, query=query, state=state
        )

    async def get_all_my_listings(
        self,
        *,
        query: Optional[str] = None,
        state: Optional[str] = None,
        per_page: int = DEFAULT_PER_PAGE,
        max_pages: Optional[int] = None,
    ) -> List[Listing]:
        return await listings.get_all_my_listings(
            self._http, self.profile, query=query, state=state, per_page=per_page, max_pages=max_pages
        )

    async def get_one_listing(self, listing_id: Union[int, str]) -> HttpResponse:
        return await listings.get_one_listing(self._http, self.profile, listing_id)

    async def post_listing(self, body: Union[ListingPostBody, Mapping[str, Any]]) -> HttpResponse:
        return await listings.post_listing(self._http, self.profile, body)

    async def get_my_orders(self, *, page: Optional[int] = None, per_page: Optional[int] = None) -> HttpResponse:
        return await orders.get_my_orders(self._http, self.profile, page=page, per_page=per_page)

    async def get_all_my_orders(
        self,
        *,
        per_page: int = DEFAULT_PER_PAGE,
        max_pages: Optional[int] = None,
    ) -> List[Order]:
        return await orders.get_all_my_orders(self._http, self.profile, per_page=per_page, max_pages=max_pages)

    async def close(self) -> None:
        if self._owns_http:
            await self._http.aclose()


__all__ = ["ReverbClient"]
