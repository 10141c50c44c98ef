"""Tests for the DummyJSON catalog client using a mocked transport."""

from __future__ import annotations

import httpx
import pytest

from src.services.clients.catalog_client import (
    CatalogUnavailableError,
    DummyJsonCatalogClient,
    ProductNotFoundError,
)
from tests.factories import CATALOG_RECORDS


def _client(handler, page_size: int = 100) -> DummyJsonCatalogClient:
    return DummyJsonCatalogClient(
        base_url="https://catalog.test/",
        timeout=1.0,
        page_size=page_size,
        transport=httpx.MockTransport(handler),
    )


def _page_handler(records):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        skip = int(request.url.params["skip"])
        limit = int(request.url.params["limit"])
        return httpx.Response(
            200,
            json={
                "products": records[skip : skip + limit],
                "total": len(records),
                "skip": skip,
                "limit": limit,
            },
        )

    return handler, seen


@pytest.mark.asyncio
async def test_fetch_products_builds_list_request():
    handler, seen = _page_handler(CATALOG_RECORDS)

    page = await _client(handler).fetch_products(limit=10, skip=0)

    assert seen[0].url.path == "/products"
    assert seen[0].url.params["limit"] == "10"
    assert seen[0].url.params["skip"] == "0"
    assert [p.id for p in page.products] == [1, 2, 3, 4]
    assert page.total == 4
    assert page.products[0].discount_percentage == 5.5


@pytest.mark.asyncio
async def test_fetch_products_with_search_uses_search_endpoint():
    handler, seen = _page_handler(CATALOG_RECORDS[:1])

    await _client(handler).fetch_products(search="iphone")

    assert seen[0].url.path == "/products/search"
    assert seen[0].url.params["q"] == "iphone"
    assert seen[0].url.params["limit"] == "100"


@pytest.mark.asyncio
async def test_fetch_all_products_walks_every_page():
    handler, seen = _page_handler(CATALOG_RECORDS)

    products = await _client(handler, page_size=3).fetch_all_products()

    assert [p.id for p in products] == [1, 2, 3, 4]
    assert [r.url.params["skip"] for r in seen] == ["0", "3"]


@pytest.mark.asyncio
async def test_fetch_all_products_stops_on_empty_page():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json={"products": [], "total": 50, "skip": 0, "limit": 100}
        )

    assert await _client(handler).fetch_all_products() == []


@pytest.mark.asyncio
async def test_fetch_product_by_id():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/products/3"
        return httpx.Response(200, json=CATALOG_RECORDS[2])

    product = await _client(handler).fetch_product_by_id(3)

    assert product.title == "MacBook Pro 16"


@pytest.mark.asyncio
async def test_fetch_product_by_id_not_found():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, json={"message": "Product with id '999' not found"})

    with pytest.raises(ProductNotFoundError) as excinfo:
        await _client(handler).fetch_product_by_id(999)

    assert excinfo.value.product_id == 999


@pytest.mark.asyncio
async def test_error_status_is_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="maintenance")

    with pytest.raises(CatalogUnavailableError) as excinfo:
        await _client(handler).fetch_products()

    assert excinfo.value.status == 503
    assert excinfo.value.message == "maintenance"


@pytest.mark.asyncio
async def test_list_404_is_unavailable_not_missing():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404)

    with pytest.raises(CatalogUnavailableError) as excinfo:
        await _client(handler).fetch_products()

    assert excinfo.value.status == 404
    assert excinfo.value.message == "Request failed with status 404"


@pytest.mark.asyncio
async def test_timeout_is_reported_as_408():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    with pytest.raises(CatalogUnavailableError) as excinfo:
        await _client(handler).fetch_products()

    assert excinfo.value.status == 408


@pytest.mark.asyncio
async def test_network_error_is_reported_as_502():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(CatalogUnavailableError) as excinfo:
        await _client(handler).fetch_product_by_id(1)

    assert excinfo.value.status == 502
    assert "connection refused" in excinfo.value.message


@pytest.mark.asyncio
async def test_malformed_payload_is_unavailable():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"id": -1, "title": "broken"})

    with pytest.raises(CatalogUnavailableError) as excinfo:
        await _client(handler).fetch_product_by_id(1)

    assert excinfo.value.status == 502


def test_client_requires_base_url():
    with pytest.raises(ValueError):
        DummyJsonCatalogClient(base_url="", timeout=1.0)
