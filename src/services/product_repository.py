"""Repository that fetches a catalog snapshot and shapes it for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from src.config import QueryConfig, settings
from src.models.insights import ProductsInsights
from src.models.listing import ListingOptions, PaginatedResult
from src.models.product import Product, ProductFilters
from src.services.catalog.insights import compute_insights
from src.services.catalog.mapper import to_domain
from src.services.catalog.query_pipeline import apply_filters, get_paginated
from src.services.clients.catalog_client import (
    CatalogClient,
    CatalogDependency,
    ProductNotFoundError,
)
from src.services.request_context import RequestContext


class ProductRepository:
    """Hides the catalog client and exposes the listing/detail/insights operations.

    Each call builds its own snapshot from a fresh fetch; nothing is shared
    between calls.
    """

    def __init__(self, client: CatalogClient, config: QueryConfig) -> None:
        self._client = client
        self._config = config

    async def get_all_products(
        self, context: RequestContext | None = None
    ) -> list[Product]:
        dtos = await self._client.fetch_all_products()
        if context is not None:
            context.logger(__name__).debug(
                "Fetched catalog snapshot", extra={"product_count": len(dtos)}
            )
        return [to_domain(dto) for dto in dtos]

    async def get_product(
        self, product_id: int, context: RequestContext | None = None
    ) -> Product | None:
        """Return the product, or None when the catalog does not know the id."""

        try:
            dto = await self._client.fetch_product_by_id(product_id)
        except ProductNotFoundError:
            if context is not None:
                context.logger(__name__).debug(
                    "Catalog reported product missing", extra={"product_id": product_id}
                )
            return None
        return to_domain(dto)

    async def list_products(
        self,
        options: ListingOptions,
        context: RequestContext | None = None,
    ) -> PaginatedResult:
        products = await self.get_all_products(context)
        return get_paginated(products, options, self._config)

    async def get_products_for_insights(
        self,
        filters: ProductFilters,
        context: RequestContext | None = None,
    ) -> list[Product]:
        products = await self.get_all_products(context)
        return apply_filters(products, filters)

    async def get_insights(
        self,
        filters: ProductFilters,
        context: RequestContext | None = None,
    ) -> ProductsInsights:
        products = await self.get_products_for_insights(filters, context)
        return compute_insights(products, self._config)


def get_product_repository(client: CatalogDependency) -> ProductRepository:
    """FastAPI dependency factory."""

    return ProductRepository(client, settings.query_config())


RepositoryDependency = Annotated[ProductRepository, Depends(get_product_repository)]
