from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import pytest

from reverb_sdk.config import ClientConfiguration
from reverb_sdk.errors import ReverbError
from reverb_sdk.listings import get_all_my_listings, get_my_listings, get_one_listing, post_listing
from reverb_sdk.models import Listing, ListingPostBody, PriceInput
from reverb_sdk.transport import MockHttpClient, create_mock_response


def listing_page(listings: list, current_page: int = 1, total: int = 0, total_pages: int = 1) -> dict:
    return {
        "listings": listings,
        "total": total,
        "current_page": current_page,
        "total_pages": total_pages,
        "_links": {},
    }


@pytest.mark.asyncio
async def test_get_my_listings_defaults(mock_client: MockHttpClient, config: ClientConfiguration) -> None:
    listings = [{"id": "1", "make": "Fender", "model": "Stratocaster", "state": {"slug": "live"}}]
    mock_client.on_get(lambda url, cfg: "/my/listings" in url, create_mock_response(listing_page(listings, total=1)))

    response = await get_my_listings(mock_client, config.profile)

    assert response.status_code == 200
    assert response.data["listings"] == listings
    requests = mock_client.get_requests()
    assert requests[0].url == "https://api.reverb.com/api/my/listings"


@pytest.mark.asyncio
async def test_get_my_listings_query_params(mock_client: MockHttpClient, config: ClientConfiguration) -> None:
    mock_client.on_get(lambda url, cfg: True, create_mock_response(listing_page([])))

    await get_my_listings(mock_client, config.profile, page=2, per_page=50, query="hello world", state="draft")

    url = mock_client.get_requests()[0].url
    assert "query=hello%20world" in url
    assert parse_qs(urlsplit(url).query) == {
        "page": ["2"],
        "per_page": ["50"],
        "query": ["hello world"],
        "state": ["draft"],
    }


@pytest.mark.asyncio
async def test_sends_profile_headers(mock_client: MockHttpClient, config: ClientConfiguration) -> None:
    mock_client.on_get(
        lambda url, cfg: cfg["headers"]["Authorization"] == "Bearer test-api-key"
        and cfg["headers"]["Accept-Version"] == "3.0",
        create_mock_response(listing_page([])),
    )

    await get_my_listings(mock_client, config.profile)

    assert mock_client.get_requests()[0].config["headers"] == dict(config.headers)


@pytest.mark.asyncio
async def test_uses_base_endpoint_from_profile(mock_client: MockHttpClient, config: ClientConfiguration) -> None:
    config.base_endpoint = "https://custom.api.com"
    mock_client.on_get(lambda url, cfg: url.startswith("https://custom.api.com"), create_mock_response(listing_page([])))

    await get_my_listings(mock_client, config.profile)

    assert mock_client.get_requests()[0].url == "https://custom.api.com/my/listings"


@pytest.mark.asyncio
async def test_get_all_my_listings_walks_pages(mock_client: MockHttpClient, config: ClientConfiguration) -> None:
    pages = {
        "1": [{"id": 1}, {"id": 2}],
        "2": [{"id": 3}, {"id": 4}],
        "3": [{"id": 5}],
    }

    def respond(url, cfg, data):
        page = parse_qs(urlsplit(url).query)["page"][0]
        return create_mock_response(listing_page(pages[page], current_page=int(page)))

    mock_client.on_get(lambda url, cfg: "/my/listings" in url, respond)

    result = await get_all_my_listings(mock_client, config.profile, state="live", per_page=2)

    assert [listing.id for listing in result] == [1, 2, 3, 4, 5]
    assert all(isinstance(listing, Listing) for listing in result)
    urls = [req.url for req in mock_client.get_requests()]
    assert len(urls) == 3
    assert all("state=live" in url and "per_page=2" in url for url in urls)


@pytest.mark.asyncio
async def test_get_all_my_listings_respects_max_pages(mock_client: MockHttpClient, config: ClientConfiguration) -> None:
    mock_client.on_get(lambda url, cfg: True, create_mock_response(listing_page([{"id": 1}])))

    result = await get_all_my_listings(mock_client, config.profile, per_page=1, max_pages=2)

    assert len(result) == 2
    assert len(mock_client.get_requests()) == 2


@pytest.mark.asyncio
async def test_get_one_listing(mock_client: MockHttpClient, config: ClientConfiguration) -> None:
    mock_client.on_get(lambda url, cfg: url.endswith("/listings/123"), create_mock_response({"id": 123}))

    response = await get_one_listing(mock_client, config.profile, 123)

    assert response.data == {"id": 123}


@pytest.mark.asyncio
async def test_post_listing_serialises_model(mock_client: MockHttpClient, config: ClientConfiguration) -> None:
    mock_client.on_post(lambda url, cfg: url.endswith("/listings"), create_mock_response({"id": 9}, 201, "Created"))
    body = ListingPostBody(make="Gibson", model="Les Paul", price=PriceInput(amount="1999.00", currency="USD"))

    response = await post_listing(mock_client, config.profile, body)

    assert response.status_code == 201
    sent = mock_client.get_requests_by_method("POST")[0]
    assert sent.data["make"] == "Gibson"
    assert sent.data["price"] == {"amount": "1999.00", "currency": "USD"}
    assert "sku" not in sent.data
    assert sent.config["headers"]["Content-Type"] == "application/hal+json"


@pytest.mark.asyncio
async def test_post_listing_accepts_mapping(mock_client: MockHttpClient, config: ClientConfiguration) -> None:
    mock_client.on_post(lambda url, cfg: True, create_mock_response({}, 201, "Created"))

    await post_listing(mock_client, config.profile, {"make": "Fender", "model": "Jazzmaster"})

    assert mock_client.get_requests()[0].data == {"make": "Fender", "model": "Jazzmaster"}


@pytest.mark.asyncio
async def test_get_all_my_listings_rejects_non_object_page(
    mock_client: MockHttpClient, config: ClientConfiguration
) -> None:
    mock_client.on_get(lambda url, cfg: True, create_mock_response("maintenance"))

    with pytest.raises(ReverbError, match="Expected a JSON object for page 1"):
        await get_all_my_listings(mock_client, config.profile)
