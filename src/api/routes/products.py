"""Routes exposing the product listing, detail and insights operations."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query, Request, status

from src.api.errors import client_error, start_context, upstream_failure
from src.api.params import (
    FiltersDependency,
    parse_positive_int,
    parse_product_id,
    parse_sort,
)
from src.models.common import ErrorResponse
from src.models.insights import ProductsInsights
from src.models.listing import ListingOptions, ProductListResponse
from src.models.product import Product
from src.services.clients.catalog_client import CatalogUnavailableError
from src.services.product_repository import RepositoryDependency

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get(
    "",
    response_model=ProductListResponse,
    responses={502: {"model": ErrorResponse}},
    summary="List products with filters, sorting and pagination",
)
async def list_products(
    request: Request,
    filters: FiltersDependency,
    repository: RepositoryDependency,
    sort: Annotated[str | None, Query()] = None,
    page: Annotated[str | None, Query()] = None,
    page_size: Annotated[str | None, Query(alias="pageSize")] = None,
) -> ProductListResponse:
    """Return one page of list items for the filtered, sorted catalog."""

    context = start_context(request, "/api/products")
    logger = context.logger(__name__)

    options = ListingOptions(
        filters=filters,
        sort=parse_sort(sort),
        page=parse_positive_int(page) or 1,
        page_size=parse_positive_int(page_size),
    )
    logger.info(
        "Fetching products",
        extra={
            "filters": filters.model_dump(exclude_none=True),
            "sort": options.sort,
            "page": options.page,
            "page_size": options.page_size,
        },
    )

    try:
        result = await repository.list_products(options, context)
    except CatalogUnavailableError as error:
        raise upstream_failure(
            context, "Failed to fetch products from external API", error
        ) from error

    logger.info(
        "Products fetched successfully",
        extra={
            "item_count": len(result.items),
            "total": result.total,
            "duration_ms": context.elapsed_ms(),
        },
    )
    return ProductListResponse.from_result(result, filters, options.sort)


@router.get(
    "/insights",
    response_model=ProductsInsights,
    responses={502: {"model": ErrorResponse}},
    summary="Aggregated metrics for the filtered catalog",
)
async def get_products_insights(
    request: Request,
    filters: FiltersDependency,
    repository: RepositoryDependency,
) -> ProductsInsights:
    """Accepts the same filters as the listing so both describe the same products."""

    context = start_context(request, "/api/products/insights")
    logger = context.logger(__name__)
    logger.info(
        "Computing product insights",
        extra={"filters": filters.model_dump(exclude_none=True)},
    )

    try:
        insights = await repository.get_insights(filters, context)
    except CatalogUnavailableError as error:
        raise upstream_failure(
            context, "Failed to compute product insights", error
        ) from error

    logger.info(
        "Insights computed successfully",
        extra={
            "total_products": insights.total_products,
            "duration_ms": context.elapsed_ms(),
        },
    )
    return insights


@router.get(
    "/{product_id}",
    response_model=Product,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
    summary="Detailed information for a single product",
)
async def get_product(
    product_id: str,
    request: Request,
    repository: RepositoryDependency,
) -> Product:
    context = start_context(request, "/api/products/{id}")
    logger = context.logger(__name__)

    parsed_id = parse_product_id(product_id)
    if parsed_id is None:
        logger.warning("Invalid product id provided", extra={"product_id": product_id})
        raise client_error(status.HTTP_400_BAD_REQUEST, "Invalid product id")

    logger.info("Fetching product by id", extra={"product_id": parsed_id})

    try:
        product = await repository.get_product(parsed_id, context)
    except CatalogUnavailableError as error:
        raise upstream_failure(
            context,
            "Failed to fetch product from external API",
            error,
            product_id=parsed_id,
        ) from error

    if product is None:
        logger.warning(
            "Product not found",
            extra={"product_id": parsed_id, "duration_ms": context.elapsed_ms()},
        )
        raise client_error(status.HTTP_404_NOT_FOUND, "Product not found")

    logger.info(
        "Product fetched successfully",
        extra={"product_id": parsed_id, "duration_ms": context.elapsed_ms()},
    )
    return product
