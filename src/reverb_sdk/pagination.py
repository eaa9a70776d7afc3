"""Generic page-walking helper for Reverb's paged collections."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, List, Mapping, Optional, Sequence, TypeVar

from .errors import ReverbError

T = TypeVar("T")

logger = logging.getLogger("reverb_sdk.pagination")

DEFAULT_PER_PAGE = 50


@dataclass
class PaginatedFetchResult(Generic[T]):
    items: List[T]
    has_more: bool
    current_page: int


@dataclass(frozen=True)
class PaginationOptions:
    per_page: int = DEFAULT_PER_PAGE
    start_page: int = 1
    max_pages: int = sys.maxsize


FetchPage = Callable[[int, int], Awaitable[PaginatedFetchResult[T]]]


async def paginate_all(
    fetch_page: FetchPage[T],
    options: Optional[PaginationOptions] = None,
    *,
    per_page: Optional[int] = None,
    start_page: Optional[int] = None,
    max_pages: Optional[int] = None,
) -> List[T]:
    """Fetch every page via ``fetch_page`` and return the items in order.

    Pages are requested one at a time. The walk stops when a page reports
    ``has_more=False``, comes back empty, or holds fewer than ``per_page``
    items (a short page ends the walk even if it claims there is more), or
    once ``max_pages`` pages have been fetched. Errors raised by
    ``fetch_page`` propagate and the items gathered so far are dropped.
    """
    opts = options or PaginationOptions()
    per_page = opts.per_page if per_page is None else per_page
    current_page = opts.start_page if start_page is None else start_page
    max_pages = opts.max_pages if max_pages is None else max_pages

    items: List[T] = []
    pages_processed = 0

    while pages_processed < max_pages:
        result = await fetch_page(current_page, per_page)
        items.extend(result.items)
        logger.debug("Fetched page=%s items=%s has_more=%s", current_page, len(result.items), result.has_more)

        if not result.has_more or not result.items:
            break
        if len(result.items) < per_page:
            break

        current_page += 1
        pages_processed += 1

    return items


def create_paginated_result(items: Sequence[T], per_page: int, current_page: int) -> PaginatedFetchResult[T]:
    return PaginatedFetchResult(items=list(items), has_more=len(items) == per_page, current_page=current_page)


def page_from_response(
    data: Mapping[str, Any],
    collection_key: str,
    per_page: int,
    current_page: int,
) -> PaginatedFetchResult[Any]:
    """Adapt a raw paged response body such as ``{"listings": [...], "total": ...}``."""
    if not isinstance(data, Mapping):
        raise ReverbError(f"Expected a JSON object for page {current_page}, got {type(data).__name__}: {data!r:.200}")
    items = data.get(collection_key) or []
    return create_paginated_result(items, per_page, current_page)


__all__ = [
    "DEFAULT_PER_PAGE",
    "FetchPage",
    "PaginatedFetchResult",
    "PaginationOptions",
    "create_paginated_result",
    "page_from_response",
    "paginate_all",
]
