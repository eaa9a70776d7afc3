"""Reverb marketplace Python SDK."""

from .client import ReverbClient
from .config import ClientConfiguration, ClientOptions, RequestProfile, __version__
from .errors import ConfigurationError, NoMockFoundError, ReverbError, TransportError
from .pagination import PaginatedFetchResult, PaginationOptions, create_paginated_result, paginate_all

__all__ = [
    "ReverbClient",
    "ClientConfiguration",
    "ClientOptions",
    "RequestProfile",
    "ConfigurationError",
    "NoMockFoundError",
    "ReverbError",
    "TransportError",
    "PaginatedFetchResult",
    "PaginationOptions",
    "create_paginated_result",
    "paginate_all",
    "__version__",
]
