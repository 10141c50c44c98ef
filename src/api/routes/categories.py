"""Routes listing the categories present in the catalog."""

from __future__ import annotations

from fastapi import APIRouter, Request

from src.api.errors import start_context, upstream_failure
from src.models.common import CategoriesResponse, ErrorResponse
from src.services.catalog.categories import extract_unique_categories
from src.services.clients.catalog_client import CatalogUnavailableError
from src.services.product_repository import RepositoryDependency

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get(
    "",
    response_model=CategoriesResponse,
    responses={502: {"model": ErrorResponse}},
    summary="Unique categories across all products",
)
async def list_categories(
    request: Request,
    repository: RepositoryDependency,
) -> CategoriesResponse:
    """Useful for populating category filter dropdowns."""

    context = start_context(request, "/api/categories")

    try:
        products = await repository.get_all_products(context)
    except CatalogUnavailableError as error:
        raise upstream_failure(context, "Failed to fetch categories", error) from error

    categories = extract_unique_categories(products)
    context.logger(__name__).info(
        "Categories fetched successfully",
        extra={
            "category_count": len(categories),
            "total_products": len(products),
            "duration_ms": context.elapsed_ms(),
        },
    )
    return CategoriesResponse(categories=categories)
