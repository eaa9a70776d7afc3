"""Exception types raised by the Reverb SDK."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .transport.base import HttpResponse


class ReverbError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(ReverbError, ValueError):
    """Raised when a client cannot be configured from the supplied options."""


class TransportError(ReverbError):
    """A request failed, either with an error status or before a response arrived."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        response: Optional["HttpResponse"] = None,
        is_network_error: bool = False,
        request_config: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.response = response
        self.is_network_error = is_network_error
        self.request_config = request_config or {}


class NoMockFoundError(TransportError):
    """Raised by the mock transport when no registered mock matches a request."""

    def __init__(self, method: str, url: str, request_config: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(f"No mock found for {method} {url}", request_config=request_config)
        self.method = method
        self.url = url


__all__ = ["ReverbError", "ConfigurationError", "TransportError", "NoMockFoundError"]
