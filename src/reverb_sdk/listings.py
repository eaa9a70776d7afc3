"""Listing endpoints."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from .config import RequestProfile
from .models import Listing, ListingPostBody
from .pagination import DEFAULT_PER_PAGE, PaginatedFetchResult, page_from_response, paginate_all
from .transport.base import HttpClient, HttpResponse
from .urls import build_url, build_url_with_query

logger = logging.getLogger("reverb_sdk.listings")


async def get_my_listings(
    http_client: HttpClient,
    profile: RequestProfile,
    *,
    page: Optional[int] = None,
    per_page: Optional[int] = None,
    query: Optional[str] = None,
    state: Optional[str] = None,
) -> HttpResponse:
    """Fetch one page of the authenticated shop's listings."""
    url = build_url_with_query(
        build_url(profile.base_endpoint, "/my/listings"),
        {"page": page, "per_page": per_page, "query": query, "state": state},
    )
    return await http_client.get(url, headers=dict(profile.headers))


async def get_all_my_listings(
    http_client: HttpClient,
    profile: RequestProfile,
    *,
    query: Optional[str] = None,
    state: Optional[str] = None,
    per_page: int = DEFAULT_PER_PAGE,
    max_pages: Optional[int] = None,
) -> List[Listing]:
    async def fetch_page(page: int, size: int) -> PaginatedFetchResult[Any]:
        response = await get_my_listings(http_client, profile, page=page, per_page=size, query=query, state=state)
        return page_from_response(response.data or {}, "listings", size, page)

    raw = await paginate_all(fetch_page, per_page=per_page, max_pages=max_pages)
    logger.debug("Fetched %s listings", len(raw))
    return [Listing.model_validate(item) for item in raw]


async def get_one_listing(http_client: HttpClient, profile: RequestProfile, listing_id: Union[int, str]) -> HttpResponse:
    return await http_client.get(build_url(profile.base_endpoint, f"/listings/{listing_id}"), headers=dict(profile.headers))


async def post_listing(
    http_client: HttpClient,
    profile: RequestProfile,
    body: Union[ListingPostBody, Mapping[str, Any]],
) -> HttpResponse:
    if isinstance(body, ListingPostBody):
        payload = body.model_dump(by_alias=True, exclude_none=True)
    else:
        payload = dict(body)
    return await http_client.post(build_url(profile.base_endpoint, "/listings"), payload, headers=dict(profile.headers))


__all__ = ["get_all_my_listings", "get_my_listings", "get_one_listing", "post_listing"]
