"""HTTP transports."""

from .base import HttpClient, HttpResponse
from .httpx_client import HttpxClient
from .mock import MockHttpClient, MockResponse, RecordedRequest, create_mock_error, create_mock_response

__all__ = [
    "HttpClient",
    "HttpResponse",
    "HttpxClient",
    "MockHttpClient",
    "MockResponse",
    "RecordedRequest",
    "create_mock_error",
    "create_mock_response",
]
