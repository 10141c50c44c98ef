"""Parsing of query and path parameters shared by the product routes."""

from __future__ import annotations

import math
from typing import Annotated

from fastapi import Depends, HTTPException, Query, status

from src.models.product import ProductFilters, ProductSort
from src.services.catalog.categories import is_valid_category

SORT_VALUES: tuple[str, ...] = (
    "price_asc",
    "price_desc",
    "rating_asc",
    "rating_desc",
    "title_asc",
    "title_desc",
)


def parse_optional_number(value: str | None) -> float | None:
    """Parse a numeric filter; anything that is not a finite number means no filter."""
    if value is None or not value.strip():
        return None
    try:
        parsed = float(value)
    except ValueError:
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


def parse_positive_int(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    try:
        parsed = int(value.strip(), 10)
    except ValueError:
        return None
    if parsed <= 0:
        return None
    return parsed


def parse_sort(value: str | None) -> ProductSort | None:
    if value in SORT_VALUES:
        return value  # type: ignore[return-value]
    return None


def parse_product_id(value: str) -> int | None:
    return parse_positive_int(value)


def filters_dependency(
    search: Annotated[str | None, Query()] = None,
    q: Annotated[str | None, Query(description="Alias of search")] = None,
    category: Annotated[str | None, Query()] = None,
    min_price: Annotated[str | None, Query(alias="minPrice")] = None,
    max_price: Annotated[str | None, Query(alias="maxPrice")] = None,
    max_stock: Annotated[str | None, Query(alias="maxStock")] = None,
) -> ProductFilters:
    """Build the filter set accepted identically by listing and insights."""

    category = category.strip() if category is not None else None
    if category and not is_valid_category(category):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid category",
        )

    return ProductFilters(
        search=search if search is not None else q,
        category=category or None,
        min_price=parse_optional_number(min_price),
        max_price=parse_optional_number(max_price),
        max_stock=parse_optional_number(max_stock),
    )


FiltersDependency = Annotated[ProductFilters, Depends(filters_dependency)]
