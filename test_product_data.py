#!/usr/bin/env python3
"""
Tests for building products from API JSON
"""

import pytest

from vintagehider.product_data import Product, parse_tags


def test_tag_string_is_split():
    assert parse_tags('vintage, scarf, wool') == ['vintage', 'scarf', 'wool']


def test_empty_tags():
    assert parse_tags('') == []
    assert parse_tags(None) == []


def test_tag_list_passes_through():
    assert parse_tags(['Vintage', 'hat']) == ['Vintage', 'hat']


def test_product_from_api():
    product = Product.from_api({
        'id': 632910392,
        'tags': 'Vintage, hat',
        'published_at': '2020-01-01T10:00:00-05:00',
        'variants': [
            {'inventory_management': 'shopify', 'inventory_quantity': 0},
            {'inventory_management': None, 'inventory_quantity': 2},
        ],
    })
    assert product.product_id == 632910392
    assert product.tags == ['Vintage', 'hat']
    assert product.variant_count == 2
    assert product.first_variant.inventory_management == 'shopify'
    assert product.first_variant.inventory_quantity == 0
    assert product.published_at.startswith('2020')


def test_product_missing_published_at_is_none():
    product = Product.from_api({'id': 1, 'tags': '', 'variants': [{}]})
    assert product.published_at is None
    assert product.first_variant.inventory_management is None


def test_product_missing_variants_raises():
    with pytest.raises(KeyError):
        Product.from_api({'id': 1, 'tags': 'vintage'})
