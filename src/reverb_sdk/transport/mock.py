"""Scriptable in-memory transport for tests."""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

from ..errors import NoMockFoundError, TransportError
from .base import HttpClient, HttpResponse

RequestMatcher = Callable[[str, Dict[str, Any]], bool]
ResponseGenerator = Callable[[str, Dict[str, Any], Any], Any]


@dataclass
class MockResponse:
    matcher: RequestMatcher
    response: Union[HttpResponse, ResponseGenerator, None] = None
    error: Optional[Exception] = None
    # None means unlimited
    times: Optional[int] = None


@dataclass
class RecordedRequest:
    method: str
    url: str
    config: Dict[str, Any] = field(default_factory=dict)
    data: Any = None


class MockHttpClient(HttpClient):
    """Returns canned responses for matching requests and records every call.

    Mocks are tried in registration order per method. A request nothing
    matches raises :class:`NoMockFoundError`.
    """

    def __init__(self) -> None:
        self._mocks: Dict[str, List[MockResponse]] = {}
        self._requests: List[RecordedRequest] = []

    async def request(self, method: str, url: str, data: Any = None, **config: Any) -> HttpResponse:
        method = method.upper()
        self._requests.append(RecordedRequest(method=method, url=url, config=config, data=data))

        for mock in self._mocks.get(method, []):
            if not mock.matcher(url, config):
                continue
            if mock.times is not None:
                if mock.times <= 0:
                    continue
                mock.times -= 1
            if mock.error is not None:
                raise mock.error
            if callable(mock.response):
                result = mock.response(url, config, data)
                if inspect.isawaitable(result):
                    result = await result
                return result
            return mock.response

        raise NoMockFoundError(method, url, config)

    def on_request(self, method: str, mock: MockResponse) -> None:
        self._mocks.setdefault(method.upper(), []).append(mock)

    def on_get(self, matcher: RequestMatcher, response: Union[HttpResponse, ResponseGenerator]) -> None:
        self.on_request("GET", MockResponse(matcher, response))

    def on_post(self, matcher: RequestMatcher, response: Union[HttpResponse, ResponseGenerator]) -> None:
        self.on_request("POST", MockResponse(matcher, response))

    def on_put(self, matcher: RequestMatcher, response: Union[HttpResponse, ResponseGenerator]) -> None:
        self.on_request("PUT", MockResponse(matcher, response))

    def on_delete(self, matcher: RequestMatcher, response: Union[HttpResponse, ResponseGenerator]) -> None:
        self.on_request("DELETE", MockResponse(matcher, response))

    def on_patch(self, matcher: RequestMatcher, response: Union[HttpResponse, ResponseGenerator]) -> None:
        self.on_request("PATCH", MockResponse(matcher, response))

    def get_requests(self) -> List[RecordedRequest]:
        return list(self._requests)

    def get_requests_by_method(self, method: str) -> List[RecordedRequest]:
        return [req for req in self._requests if req.method == method.upper()]

    def clear_requests(self) -> None:
        self._requests = []

    def clear_mocks(self) -> None:
        self._mocks.clear()

    def reset(self) -> None:
        self.clear_requests()
        self.clear_mocks()


def create_mock_response(data: Any, status_code: int = 200, status_text: str = "OK") -> HttpResponse:
    return HttpResponse(data=data, status_code=status_code, status_text=status_text)


def create_mock_error(
    message: str,
    status_code: Optional[int] = None,
    response: Optional[HttpResponse] = None,
) -> TransportError:
    return TransportError(message, status_code=status_code, response=response)


__all__ = [
    "MockHttpClient",
    "MockResponse",
    "RecordedRequest",
    "create_mock_error",
    "create_mock_response",
]
