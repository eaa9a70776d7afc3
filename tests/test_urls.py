from __future__ import annotations

import pytest

from reverb_sdk.urls import build_query_string, build_url, build_url_with_query


@pytest.mark.parametrize(
    "base, path, expected",
    [
        ("https://api.reverb.com/api", "/my/listings", "https://api.reverb.com/api/my/listings"),
        ("https://api.reverb.com/api", "my/listings", "https://api.reverb.com/api/my/listings"),
        ("https://api.reverb.com/api/", "/my/listings", "https://api.reverb.com/api/my/listings"),
        ("https://api.reverb.com/api", "https://example.com/absolute", "https://example.com/absolute"),
        ("https://api.reverb.com/api", "http://example.com/plain", "http://example.com/plain"),
    ],
)
def test_build_url(base: str, path: str, expected: str) -> None:
    assert build_url(base, path) == expected


def test_query_string_skips_none() -> None:
    assert build_query_string({"query": "guitar", "state": None}) == "query=guitar"


def test_query_string_encodes_values() -> None:
    assert build_query_string({"search": "hello world"}) == "search=hello%20world"
    assert build_query_string({"q": "a&b=c/d"}) == "q=a%26b%3Dc%2Fd"
    assert build_query_string({"q": "it's (new)!"}) == "q=it's%20(new)!"


def test_query_string_scalars() -> None:
    assert build_query_string({"page": 1, "per_page": 50, "live": True}) == "page=1&per_page=50&live=true"


def test_query_string_keeps_empty_string() -> None:
    assert build_query_string({"sku": ""}) == "sku="


def test_build_url_with_query() -> None:
    url = "https://api.reverb.com/api/my/listings"
    assert build_url_with_query(url, {"page": 1}) == f"{url}?page=1"
    assert build_url_with_query(url, {}) == url
    assert build_url_with_query(url, {"page": None}) == url
