"""Pytest configuration and fixtures for the catalog BFF."""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.config import QueryConfig
from src.models.product import Product, ProductDto
from src.services.clients.catalog_client import get_catalog_client
from tests.factories import CATALOG_RECORDS, StubCatalogClient


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "asyncio: marks tests as async tests")


@pytest.fixture()
def catalog_products() -> list[Product]:
    from src.services.catalog.mapper import to_domain

    return [to_domain(ProductDto.model_validate(record)) for record in CATALOG_RECORDS]


@pytest.fixture()
def query_config() -> QueryConfig:
    return QueryConfig(default_page_size=20, low_stock_threshold=10, top_rated_limit=5)


@pytest.fixture()
def catalog_stub():
    """Serve the fixed catalog instead of calling the upstream API."""
    from src.main import app

    stub = StubCatalogClient(CATALOG_RECORDS)
    app.dependency_overrides[get_catalog_client] = lambda: stub
    yield stub
    app.dependency_overrides.pop(get_catalog_client, None)


@pytest_asyncio.fixture()
async def client(catalog_stub):
    """Return an HTTPX async client pointing at the FastAPI app."""
    from src.main import app

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as test_client:
        yield test_client
