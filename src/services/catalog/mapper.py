"""Conversions between upstream records, domain products and list items."""

from __future__ import annotations

from src.models.product import Product, ProductDto, ProductListItem


def to_domain(dto: ProductDto) -> Product:
    return Product(
        id=dto.id,
        title=dto.title,
        description=dto.description,
        price=dto.price,
        category=dto.category,
        thumbnail=dto.thumbnail,
        rating=dto.rating,
        stock=dto.stock,
        brand=dto.brand,
        images=list(dto.images) if dto.images is not None else None,
        discount_percentage=dto.discount_percentage,
    )


def to_list_item(product: Product) -> ProductListItem:
    return ProductListItem(
        id=product.id,
        title=product.title,
        price=product.price,
        category=product.category,
        thumbnail=product.thumbnail,
        rating=product.rating,
        stock=product.stock,
    )
