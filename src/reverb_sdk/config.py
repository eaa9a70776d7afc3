"""Client configuration and the header set derived from it."""

from __future__ import annotations

import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from .errors import ConfigurationError

__version__ = "0.1.0"

DEFAULT_BASE_ENDPOINT = "https://api.reverb.com/api"
USER_AGENT = f"reverb-sdk-python/{__version__}"

DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType(
    {
        "Content-Type": "application/hal+json",
        "Accept-Version": "3.0",
        "Accept": "application/hal+json",
        "Accept-Language": "en",
        "X-Display-Currency": "USD",
        "User-Agent": USER_AGENT,
    }
)

DEFAULT_API_VERSION = DEFAULT_HEADERS["Accept-Version"]
DEFAULT_LOCALE = DEFAULT_HEADERS["Accept-Language"]
DEFAULT_DISPLAY_CURRENCY = DEFAULT_HEADERS["X-Display-Currency"]

HeaderSet = Mapping[str, str]


class ClientOptions(BaseModel):
    """Construction input; accepts snake_case names or the camelCase wire names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    api_key: Optional[str] = None
    api_version: Optional[str] = None
    base_endpoint: Optional[str] = None
    display_currency: Optional[str] = None
    shipping_region: Optional[str] = None
    locale: Optional[str] = None


@dataclass(frozen=True)
class RequestProfile:
    """Everything an endpoint wrapper needs to build a request."""

    base_endpoint: str
    api_key: str
    headers: HeaderSet
    version: str
    locale: str
    display_currency: str
    shipping_region: Optional[str] = None


def derive_headers(
    api_key: str,
    api_version: str,
    display_currency: str,
    locale: str,
    shipping_region: Optional[str] = None,
) -> HeaderSet:
    headers = dict(DEFAULT_HEADERS)
    headers["Authorization"] = f"Bearer {api_key}"
    headers["Accept-Version"] = api_version
    headers["X-Display-Currency"] = display_currency
    headers["Accept-Language"] = locale
    if shipping_region:
        headers["X-Shipping-Region"] = shipping_region
    return MappingProxyType(headers)


def _validate_endpoint(endpoint: str) -> str:
    try:
        url = httpx.URL(endpoint)
    except (httpx.InvalidURL, TypeError) as exc:
        raise ConfigurationError(f"Reverb: invalid base endpoint {endpoint!r}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise ConfigurationError(f"Reverb: base endpoint must be an absolute http(s) URL, got {endpoint!r}")
    return endpoint


class ClientConfiguration:
    """Mutable client settings.

    Every setter re-derives the header set and the request profile before
    returning, so ``headers`` and ``profile`` always match the current
    fields. Changing ``base_endpoint`` only rebuilds the profile; the header
    set object is left as it was since no header depends on the endpoint.

    Not safe for concurrent mutation: callers sharing one instance across
    tasks or threads must serialise writes.
    """

    def __init__(
        self,
        api_key: Optional[str],
        *,
        api_version: Optional[str] = None,
        base_endpoint: Optional[str] = None,
        display_currency: Optional[str] = None,
        shipping_region: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("Reverb: apiKey is required")

        self._api_key = api_key
        self._api_version = api_version or DEFAULT_API_VERSION
        self._base_endpoint = _validate_endpoint(base_endpoint) if base_endpoint else DEFAULT_BASE_ENDPOINT
        self._display_currency = display_currency or DEFAULT_DISPLAY_CURRENCY
        self._shipping_region = shipping_region or None
        self._locale = locale or DEFAULT_LOCALE

        self._headers: HeaderSet
        self._profile: RequestProfile
        self._update_headers()

    @classmethod
    def from_options(cls, options: Union[ClientOptions, Mapping[str, Any]]) -> "ClientConfiguration":
        if not isinstance(options, ClientOptions):
            try:
                options = ClientOptions.model_validate(dict(options))
            except ValidationError as exc:
                raise ConfigurationError(f"Reverb: invalid client options: {exc}") from exc
        return cls(
            options.api_key,
            api_version=options.api_version,
            base_endpoint=options.base_endpoint,
            display_currency=options.display_currency,
            shipping_region=options.shipping_region,
            locale=options.locale,
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfiguration":
        env = os.environ if environ is None else environ
        return cls(
            env.get("REVERB_API_KEY"),
            api_version=env.get("REVERB_API_VERSION"),
            base_endpoint=env.get("REVERB_BASE_ENDPOINT"),
            display_currency=env.get("REVERB_DISPLAY_CURRENCY"),
            shipping_region=env.get("REVERB_SHIPPING_REGION"),
            locale=env.get("REVERB_LOCALE"),
        )

    def _update_headers(self) -> None:
        self._headers = derive_headers(
            self._api_key,
            self._api_version,
            self._display_currency,
            self._locale,
            self._shipping_region,
        )
        self._update_profile()

    def _update_profile(self) -> None:
        self._profile = RequestProfile(
            base_endpoint=self._base_endpoint,
            api_key=self._api_key,
            headers=self._headers,
            version=self._api_version,
            locale=self._locale,
            display_currency=self._display_currency,
            shipping_region=self._shipping_region,
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def headers(self) -> HeaderSet:
        return self._headers

    @property
    def profile(self) -> RequestProfile:
        return self._profile

    @property
    def api_version(self) -> str:
        return self._api_version

    @api_version.setter
    def api_version(self, value: str) -> None:
        self._api_version = value
        self._update_headers()

    @property
    def display_currency(self) -> str:
        return self._display_currency

    @display_currency.setter
    def display_currency(self, value: str) -> None:
        self._display_currency = value
        self._update_headers()

    @property
    def shipping_region(self) -> Optional[str]:
        return self._shipping_region

    @shipping_region.setter
    def shipping_region(self, value: Optional[str]) -> None:
        # an empty region means "no region", never an empty header
        self._shipping_region = value or None
        self._update_headers()

    @property
    def locale(self) -> str:
        return self._locale

    @locale.setter
    def locale(self, value: str) -> None:
        self._locale = value
        self._update_headers()

    @property
    def base_endpoint(self) -> str:
        return self._base_endpoint

    @base_endpoint.setter
    def base_endpoint(self, value: str) -> None:
        self._base_endpoint = _validate_endpoint(value)
        self._update_profile()

    def __repr__(self) -> str:
        return (
            f"ClientConfiguration(base_endpoint={self._base_endpoint!r}, api_version={self._api_version!r}, "
            f"locale={self._locale!r}, display_currency={self._display_currency!r}, "
            f"shipping_region={self._shipping_region!r})"
        )


__all__ = [
    "ClientConfiguration",
    "ClientOptions",
    "DEFAULT_BASE_ENDPOINT",
    "DEFAULT_HEADERS",
    "HeaderSet",
    "RequestProfile",
    "USER_AGENT",
    "derive_headers",
]
