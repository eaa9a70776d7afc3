"""URL and query string helpers."""

from __future__ import annotations

from typing import Mapping, Optional, Union
from urllib.parse import quote

QueryValue = Optional[Union[str, int, float, bool]]

# characters encodeURIComponent leaves alone on top of quote()'s unreserved set
_SAFE = "!*'()"


def _encode(value: object) -> str:
    if isinstance(value, bool):
        value = "true" if value else "false"
    return quote(str(value), safe=_SAFE)


def build_url(base_url: str, path: str) -> str:
    """Join ``path`` onto ``base_url`` with exactly one slash.

    Absolute ``http://`` or ``https://`` paths replace the base entirely.
    """
    if path.startswith(("http://", "https://")):
        return path
    base = base_url[:-1] if base_url.endswith("/") else base_url
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{base}{path}"


def build_query_string(params: Mapping[str, QueryValue]) -> str:
    """Encode ``params`` without a leading ``?``; ``None`` values are skipped."""
    return "&".join(f"{_encode(key)}={_encode(value)}" for key, value in params.items() if value is not None)


def build_url_with_query(url: str, params: Mapping[str, QueryValue]) -> str:
    query = build_query_string(params)
    if not query:
        return url
    return f"{url}?{query}"


__all__ = ["QueryValue", "build_query_string", "build_url", "build_url_with_query"]
