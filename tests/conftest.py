from __future__ import annotations

import pytest

from reverb_sdk.config import ClientConfiguration
from reverb_sdk.transport import MockHttpClient


@pytest.fixture()
def config() -> ClientConfiguration:
    return ClientConfiguration("test-api-key")


@pytest.fixture()
def mock_client() -> MockHttpClient:
    return MockHttpClient()
