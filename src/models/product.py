"""Product domain models and API schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import ConfigDict, Field

from src.models.base import CamelModel

ProductSort = Literal[
    "price_asc",
    "price_desc",
    "rating_asc",
    "rating_desc",
    "title_asc",
    "title_desc",
]


class ProductDto(CamelModel):
    """Single product as returned by the upstream catalog API.

    Only the fields the service cares about are modelled; anything else the
    upstream sends (tags, reviews, dimensions, ...) is ignored.
    """

    id: int = Field(..., gt=0, description="Upstream product identifier")
    title: str
    description: str = ""
    price: float = Field(..., ge=0)
    category: str = ""
    thumbnail: str = ""
    rating: float = Field(0, ge=0)
    stock: int = Field(0, ge=0)
    brand: str | None = None
    images: list[str] | None = None
    discount_percentage: float | None = None


class ProductsResponseDto(CamelModel):
    """Page of products as returned by the upstream list/search endpoints."""

    products: list[ProductDto] = Field(default_factory=list)
    total: int = 0
    skip: int = 0
    limit: int = 0


class Product(CamelModel):
    """Internal domain record returned to the frontend."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    description: str
    price: float
    category: str
    thumbnail: str
    rating: float
    stock: int
    brand: str | None = None
    images: list[str] | None = None
    discount_percentage: float | None = None


class ProductListItem(CamelModel):
    """Lightweight representation optimized for list/table views."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    price: float
    category: str
    thumbnail: str
    rating: float
    stock: int


class ProductFilters(CamelModel):
    """Filters accepted by the listing and insights endpoints.

    Every field is optional; a missing field imposes no constraint.
    """

    model_config = ConfigDict(frozen=True)

    search: str | None = Field(
        None,
        description="Case-insensitive match on title, description and category",
    )
    category: str | None = Field(None, description="Exact category match")
    min_price: float | None = None
    max_price: float | None = None
    max_stock: float | None = None
