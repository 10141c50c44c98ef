"""Schemas for paginated product listings."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import Field

from src.models.base import CamelModel
from src.models.product import ProductFilters, ProductListItem, ProductSort


@dataclass(frozen=True)
class ListingOptions:
    """Everything a listing request can ask of the query pipeline."""

    filters: ProductFilters = field(default_factory=ProductFilters)
    sort: ProductSort | None = None
    page: int = 1
    page_size: int | None = None


class PaginatedResult(CamelModel):
    """One page of listing projections plus the resolved window."""

    items: list[ProductListItem] = Field(default_factory=list)
    total: int = Field(..., ge=0, description="Matches before pagination")
    page: int = Field(..., ge=1, description="Resolved (clamped) page number")
    page_size: int = Field(..., gt=0)
    total_pages: int = Field(..., ge=1)


class PaginationInfo(CamelModel):
    """Structured pagination block for richer consumers."""

    page: int
    page_size: int
    total: int
    total_pages: int


class ProductListResponse(CamelModel):
    """Response body for GET /api/products."""

    items: list[ProductListItem]
    total: int
    page: int
    page_size: int
    pagination: PaginationInfo
    applied_filters: ProductFilters
    sort: ProductSort | None = None

    @classmethod
    def from_result(
        cls,
        result: PaginatedResult,
        filters: ProductFilters,
        sort: ProductSort | None,
    ) -> ProductListResponse:
        return cls(
            items=result.items,
            total=result.total,
            page=result.page,
            page_size=result.page_size,
            pagination=PaginationInfo(
                page=result.page,
                page_size=result.page_size,
                total=result.total,
                total_pages=result.total_pages,
            ),
            applied_filters=filters,
            sort=sort,
        )
