"""Pure functions computing aggregate product metrics."""

from __future__ import annotations

from collections.abc import Sequence

from src.config import QueryConfig
from src.models.insights import CategoryCount, CategoryStock, ProductsInsights
from src.models.product import Product, ProductListItem
from src.services.catalog.mapper import to_list_item
from src.services.catalog.query_pipeline import apply_sort


def compute_average_price(products: Sequence[Product]) -> float:
    if not products:
        return 0
    return sum(p.price for p in products) / len(products)


def compute_average_rating(products: Sequence[Product]) -> float:
    if not products:
        return 0
    return sum(p.rating for p in products) / len(products)


def compute_average_stock(products: Sequence[Product]) -> float:
    if not products:
        return 0
    return sum(p.stock for p in products) / len(products)


def compute_total_stock(products: Sequence[Product]) -> int:
    return sum(p.stock for p in products)


def compute_most_common_category(
    products: Sequence[Product],
) -> CategoryCount | None:
    """Category with the strictly greatest count; the first to reach it wins ties."""
    if not products:
        return None

    counts: dict[str, int] = {}
    for product in products:
        counts[product.category] = counts.get(product.category, 0) + 1

    max_category: str | None = None
    max_count = 0
    for category, count in counts.items():
        if count > max_count:
            max_category = category
            max_count = count

    # An unnamed category is reported as no category at all.
    if not max_category:
        return None

    return CategoryCount(name=max_category, count=max_count)


def compute_low_stock_count(products: Sequence[Product], threshold: int) -> int:
    """Number of products whose stock is strictly below ``threshold``."""
    return sum(1 for p in products if p.stock < threshold)


def compute_top_rated_products(
    products: Sequence[Product],
    limit: int,
) -> list[ProductListItem]:
    ranked = apply_sort(products, "rating_desc")
    return [to_list_item(p) for p in ranked[:limit]]


def compute_stock_by_category(products: Sequence[Product]) -> list[CategoryStock]:
    totals: dict[str, int] = {}
    for product in products:
        totals[product.category] = totals.get(product.category, 0) + product.stock

    return [
        CategoryStock(category=category, total_stock=total_stock)
        for category, total_stock in totals.items()
    ]


def compute_insights(
    products: Sequence[Product],
    config: QueryConfig,
) -> ProductsInsights:
    """Aggregate an already-filtered product set into a single snapshot."""

    return ProductsInsights(
        average_price_global=compute_average_price(products),
        average_rating_global=compute_average_rating(products),
        average_stock_global=compute_average_stock(products),
        total_products=len(products),
        total_stock=compute_total_stock(products),
        most_common_category=compute_most_common_category(products),
        low_stock_count=compute_low_stock_count(products, config.low_stock_threshold),
        top_rated_products=compute_top_rated_products(products, config.top_rated_limit),
        stock_by_category=compute_stock_by_category(products),
    )
