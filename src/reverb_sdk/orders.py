"""Selling-side order endpoints."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from .config import RequestProfile
from .models import Order
from .pagination import DEFAULT_PER_PAGE, PaginatedFetchResult, page_from_response, paginate_all
from .transport.base import HttpClient, HttpResponse
from .urls import build_url, build_url_with_query

logger = logging.getLogger("reverb_sdk.orders")


async def get_my_orders(
    http_client: HttpClient,
    profile: RequestProfile,
    *,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
) -> HttpResponse:
    url = build_url_with_query(
        build_url(profile.base_endpoint, "/my/orders/selling/all"),
        {"page": page, "per_page": per_page},
    )
    return await http_client.get(url, headers=dict(profile.headers))


async def get_all_my_orders(
    http_client: HttpClient,
    profile: RequestProfile,
    *,
    per_page: int = DEFAULT_PER_PAGE,
    max_pages: Optional[int] = None,
) -> List[Order]:
    async def fetch_page(page: int, size: int) -> PaginatedFetchResult[Any]:
        response = await get_my_orders(http_client, profile, page=page, per_page=size)
        return page_from_response(response.data or {}, "orders", size, page)

    raw = await paginate_all(fetch_page, per_page=per_page, max_pages=max_pages)
    logger.debug("Fetched %s orders", len(raw))
    return [Order.model_validate(item) for item in raw]


__all__ = ["get_all_my_orders", "get_my_orders"]
