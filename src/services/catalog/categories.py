"""Helpers for extracting and validating product categories."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from src.models.product import Product
from src.services.catalog.query_pipeline import collation_key

MAX_CATEGORY_LENGTH = 100


def extract_unique_categories(products: Iterable[Product]) -> list[str]:
    """Return trimmed, non-empty, de-duplicated category names in sorted order."""

    categories: set[str] = set()
    for product in products:
        if isinstance(product.category, str):
            normalized = product.category.strip()
            if normalized:
                categories.add(normalized)

    return sorted(categories, key=lambda name: (collation_key(name), name))


def is_valid_category(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    trimmed = value.strip()
    return 0 < len(trimmed) <= MAX_CATEGORY_LENGTH
