"""Tests for the insights aggregation functions."""

from __future__ import annotations

from src.config import QueryConfig
from src.models.product import ProductFilters
from src.services.catalog.insights import (
    compute_insights,
    compute_low_stock_count,
    compute_most_common_category,
    compute_stock_by_category,
    compute_top_rated_products,
)
from src.services.catalog.query_pipeline import apply_filters
from tests.factories import make_product


def test_insights_over_sample_catalog(catalog_products, query_config):
    insights = compute_insights(catalog_products, query_config)

    # (999 + 799 + 1999 + 1299) / 4
    assert insights.average_price_global == 1274
    assert insights.total_stock == 105
    assert insights.total_products == 4
    assert insights.most_common_category is not None
    assert insights.most_common_category.name == "smartphones"
    assert insights.most_common_category.count == 2
    # only the MacBook is below the threshold of 10
    assert insights.low_stock_count == 1


def test_averages_for_rating_and_stock(catalog_products, query_config):
    insights = compute_insights(catalog_products, query_config)

    assert insights.average_rating_global == (4.8 + 4.5 + 4.9 + 4.3) / 4
    assert insights.average_stock_global == 105 / 4


def test_insights_over_empty_set(query_config):
    insights = compute_insights([], query_config)

    assert insights.average_price_global == 0
    assert insights.average_rating_global == 0
    assert insights.average_stock_global == 0
    assert insights.total_products == 0
    assert insights.total_stock == 0
    assert insights.most_common_category is None
    assert insights.low_stock_count == 0
    assert insights.top_rated_products == []
    assert insights.stock_by_category == []


def test_top_rated_products_sorted_by_rating(catalog_products, query_config):
    insights = compute_insights(catalog_products, query_config)

    assert [p.rating for p in insights.top_rated_products] == [4.9, 4.8, 4.5, 4.3]


def test_top_rated_respects_limit_and_ties_keep_input_order():
    products = [
        make_product(id=1, rating=4.0),
        make_product(id=2, rating=5.0),
        make_product(id=3, rating=4.0),
        make_product(id=4, rating=4.0),
    ]

    top = compute_top_rated_products(products, limit=3)

    assert [p.id for p in top] == [2, 1, 3]


def test_stock_by_category_in_first_seen_order(catalog_products):
    stock = compute_stock_by_category(catalog_products)

    assert [(s.category, s.total_stock) for s in stock] == [
        ("smartphones", 80),
        ("laptops", 25),
    ]


def test_most_common_category_tie_goes_to_first_to_reach_max():
    products = [
        make_product(id=1, category="b"),
        make_product(id=2, category="a"),
        make_product(id=3, category="a"),
        make_product(id=4, category="b"),
    ]

    most_common = compute_most_common_category(products)

    assert most_common is not None
    assert most_common.name == "b"
    assert most_common.count == 2


def test_most_common_category_ignores_unnamed_category():
    products = [make_product(id=1, category=""), make_product(id=2, category="")]

    assert compute_most_common_category(products) is None


def test_low_stock_boundary_is_not_low():
    products = [
        make_product(id=1, stock=9),
        make_product(id=2, stock=10),
        make_product(id=3, stock=11),
    ]

    assert compute_low_stock_count(products, threshold=10) == 1


def test_thresholds_come_from_config(catalog_products):
    config = QueryConfig(low_stock_threshold=31, top_rated_limit=2)

    insights = compute_insights(catalog_products, config)

    assert insights.low_stock_count == 3
    assert [p.id for p in insights.top_rated_products] == [3, 1]


def test_insights_respect_filters(catalog_products, query_config):
    filtered = apply_filters(catalog_products, ProductFilters(category="smartphones"))

    insights = compute_insights(filtered, query_config)

    assert insights.total_products == 2
    assert insights.most_common_category.name == "smartphones"
    assert insights.most_common_category.count == 2
    assert insights.average_price_global == 899


def test_insights_serialize_with_camel_case_keys(catalog_products, query_config):
    payload = compute_insights(catalog_products, query_config).model_dump(by_alias=True)

    assert payload["averagePriceGlobal"] == 1274
    assert payload["mostCommonCategory"] == {"name": "smartphones", "count": 2}
    assert payload["stockByCategory"][0] == {"category": "smartphones", "totalStock": 80}
