"""In-memory filter, sort and pagination over a catalog snapshot.

Listing and insights both go through ``apply_filters`` so the two endpoints
always describe the same population for the same filters.
"""

from __future__ import annotations

import math
import unicodedata
from collections.abc import Callable, Sequence
from typing import Any

from src.config import QueryConfig
from src.models.listing import ListingOptions, PaginatedResult
from src.models.product import Product, ProductFilters, ProductSort
from src.services.catalog.mapper import to_list_item


def collation_key(text: str) -> str:
    """Case- and accent-insensitive key used for human-facing ordering."""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


# sort value -> (key function, descending)
_SORT_KEYS: dict[str, tuple[Callable[[Product], Any], bool]] = {
    "price_asc": (lambda p: p.price, False),
    "price_desc": (lambda p: p.price, True),
    "rating_asc": (lambda p: p.rating, False),
    "rating_desc": (lambda p: p.rating, True),
    "title_asc": (lambda p: collation_key(p.title), False),
    "title_desc": (lambda p: collation_key(p.title), True),
}


def _matches(product: Product, filters: ProductFilters) -> bool:
    if filters.category and product.category != filters.category:
        return False

    if filters.min_price is not None and product.price < filters.min_price:
        return False

    if filters.max_price is not None and product.price > filters.max_price:
        return False

    if filters.max_stock is not None and product.stock > filters.max_stock:
        return False

    if filters.search:
        haystack = f"{product.title} {product.description} {product.category}"
        if filters.search.lower() not in haystack.lower():
            return False

    return True


def apply_filters(
    products: Sequence[Product],
    filters: ProductFilters | None = None,
) -> list[Product]:
    """Keep products satisfying every specified criterion, in input order."""
    if filters is None:
        return list(products)
    return [product for product in products if _matches(product, filters)]


def apply_sort(
    products: Sequence[Product],
    sort: ProductSort | None = None,
) -> list[Product]:
    """Return a newly built list; the caller's sequence is never reordered.

    Equal keys keep their input order in both directions.
    """
    if not sort or sort not in _SORT_KEYS:
        return list(products)

    key, descending = _SORT_KEYS[sort]
    return sorted(products, key=key, reverse=descending)


def paginate(
    products: Sequence[Product],
    page: int,
    page_size: int | None,
    config: QueryConfig,
) -> PaginatedResult:
    """Slice one page of list items, clamping the page into range."""
    safe_page_size = page_size if page_size and page_size > 0 else config.default_page_size
    total = len(products)
    total_pages = max(1, math.ceil(total / safe_page_size))

    clamped_page = min(max(page, 1), total_pages)
    start = (clamped_page - 1) * safe_page_size
    end = start + safe_page_size

    return PaginatedResult(
        items=[to_list_item(product) for product in products[start:end]],
        total=total,
        page=clamped_page,
        page_size=safe_page_size,
        total_pages=total_pages,
    )


def get_paginated(
    products: Sequence[Product],
    options: ListingOptions,
    config: QueryConfig,
) -> PaginatedResult:
    """Filter, then sort, then paginate. The order of the steps is fixed."""
    filtered = apply_filters(products, options.filters)
    ordered = apply_sort(filtered, options.sort)
    return paginate(ordered, options.page, options.page_size, config)
