"""Schemas for aggregated catalog metrics."""

from __future__ import annotations

from pydantic import Field

from src.models.base import CamelModel
from src.models.product import ProductListItem


class CategoryCount(CamelModel):
    name: str
    count: int


class CategoryStock(CamelModel):
    category: str
    total_stock: int


class ProductsInsights(CamelModel):
    """Aggregated metrics returned by the insights endpoint."""

    average_price_global: float = 0
    average_rating_global: float = 0
    average_stock_global: float = 0
    total_products: int = 0
    total_stock: int = 0
    most_common_category: CategoryCount | None = None
    low_stock_count: int = 0
    top_rated_products: list[ProductListItem] = Field(default_factory=list)
    stock_by_category: list[CategoryStock] = Field(default_factory=list)
