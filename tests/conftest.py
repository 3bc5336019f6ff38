from __future__ import annotations

from decimal import Decimal

import pytest

from rest_framework.test import APIClient

from modules.products.models import Product

VALID_PRODUCT = {
    "name": "Lightweight Golf Shoe",
    "description": "Golf Men Lightweight",
    "demographic": "Men",
    "category": "Golf",
    "type": "Shoe",
    "release_date": "05/17/2021",
    "price": Decimal("59.99"),
    "quantity": 25,
    "brand": "Nike",
    "material": "Leather",
    "primary_color_code": "#000000",
    "secondary_color_code": "#ffffff",
    "style_number": "sc12345",
    "global_product_code": "po-1234567",
    "img_src": "https://example.com/img/shoe.png",
    "active": True,
}


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def product_data():
    """A fresh copy of a product payload that passes every catalog rule."""
    return dict(VALID_PRODUCT)


@pytest.fixture()
def make_product():
    """Factory persisting a valid Product; keyword arguments override fields."""

    def _make(**overrides) -> Product:
        product = Product(**{**VALID_PRODUCT, **overrides})
        product.save()
        return product

    return _make
