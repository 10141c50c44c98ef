"""Catalog source client abstractions and implementations.

This module is the only place that knows the concrete shape of the upstream
catalog endpoints. Everything above it works with validated DTOs.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Annotated, Any

import httpx
from fastapi import Depends
from pydantic import ValidationError

from src.config import settings
from src.models.product import ProductDto, ProductsResponseDto

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for failures originating at the catalog boundary."""


class CatalogUnavailableError(CatalogError):
    """Timeout, network failure or non-success status from the catalog API."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


class ProductNotFoundError(CatalogError):
    """The catalog has no product with the requested identifier."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


class CatalogClient(ABC):
    """Abstract catalog interface returning validated upstream records."""

    page_size: int = 100

    @abstractmethod
    async def fetch_products(
        self,
        *,
        search: str | None = None,
        limit: int | None = None,
        skip: int = 0,
    ) -> ProductsResponseDto:
        """Return one upstream page, optionally text-filtered server-side."""

    @abstractmethod
    async def fetch_product_by_id(self, product_id: int) -> ProductDto:
        """Return a single product or raise ProductNotFoundError."""

    async def fetch_all_products(self) -> list[ProductDto]:
        """Walk upstream pages until the reported total has been collected."""

        page = await self.fetch_products(limit=self.page_size, skip=0)
        products = list(page.products)
        while page.products and len(products) < page.total:
            page = await self.fetch_products(limit=self.page_size, skip=len(products))
            products.extend(page.products)
        return products


class DummyJsonCatalogClient(CatalogClient):
    """Catalog implementation backed by the DummyJSON products API."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float,
        page_size: int = 100,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not base_url:
            raise ValueError("Catalog base URL must be provided")
        if page_size <= 0:
            raise ValueError("Catalog page size must be positive")

        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self.page_size = page_size

    async def fetch_products(
        self,
        *,
        search: str | None = None,
        limit: int | None = None,
        skip: int = 0,
    ) -> ProductsResponseDto:
        path = "/products/search" if search else "/products"
        params: dict[str, Any] = {
            "limit": limit if limit is not None else self.page_size,
            "skip": skip,
        }
        if search:
            params["q"] = search

        response = await self._get(path, params=params)
        return self._validate(ProductsResponseDto, response)

    async def fetch_product_by_id(self, product_id: int) -> ProductDto:
        response = await self._get(f"/products/{product_id}", not_found_id=product_id)
        return self._validate(ProductDto, response)

    async def _get(
        self,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        not_found_id: int | None = None,
    ) -> httpx.Response:
        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.get(path, params=params)
            except httpx.TimeoutException as exc:
                logger.warning("Catalog request timed out", extra={"path": path})
                raise CatalogUnavailableError(
                    408, "Request to catalog API timed out"
                ) from exc
            except httpx.HTTPError as exc:
                logger.warning(
                    "Network error while calling catalog API: %s",
                    exc,
                    extra={"path": path},
                )
                raise CatalogUnavailableError(
                    502, f"Network error while calling catalog API: {exc}"
                ) from exc

        if response.status_code == httpx.codes.NOT_FOUND and not_found_id is not None:
            raise ProductNotFoundError(not_found_id)

        if response.is_error:
            logger.warning(
                "Catalog API responded with status %s",
                response.status_code,
                extra={"path": path},
            )
            raise CatalogUnavailableError(
                response.status_code,
                response.text or f"Request failed with status {response.status_code}",
            )

        return response

    @staticmethod
    def _validate(model: type[Any], response: httpx.Response) -> Any:
        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            logger.warning("Catalog API returned an unexpected payload: %s", exc)
            raise CatalogUnavailableError(
                502, "Catalog API returned an unexpected payload"
            ) from exc


_catalog_client: CatalogClient | None = None


def _initialize_catalog_client() -> CatalogClient:
    return DummyJsonCatalogClient(
        base_url=settings.CATALOG_BASE_URL,
        timeout=settings.CATALOG_TIMEOUT_SECONDS,
        page_size=settings.MAX_PRODUCTS_PAGE_SIZE,
    )


_catalog_client = _initialize_catalog_client()


def get_catalog_client() -> CatalogClient:
    """FastAPI dependency returning the configured catalog client."""

    return _catalog_client


CatalogDependency = Annotated[CatalogClient, Depends(get_catalog_client)]
