"""Pytest configuration and fixtures"""
import os
from decimal import Decimal

import pytest

# Keep tests off the network and independent of the caller's environment
os.environ.setdefault("CATALOG_URL", "https://catalog.test/products")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from nettbutikk.errors import CatalogUnavailableError  # noqa: E402
from nettbutikk.models import Product  # noqa: E402


def make_product(product_id: int, price="9.99", title=None, description="Test product") -> Product:
    """Build a product with sensible defaults."""
    return Product(
        id=product_id,
        title=title or f"Product {product_id}",
        description=description,
        price=Decimal(price),
    )


class FakeFetch:
    """Stand-in for the catalog fetch capability; records each call."""

    def __init__(self, result):
        self.result = result
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if isinstance(self.result, Exception):
            raise self.result
        return list(self.result)


@pytest.fixture
def product_factory():
    return make_product


@pytest.fixture
def sample_products():
    """Three catalog products"""
    return [
        make_product(1, "9.99", title="Backpack"),
        make_product(2, "22.30", title="T-Shirt"),
        make_product(3, "55.99", title="Jacket"),
    ]


@pytest.fixture
def sample_catalog_payload():
    """Catalog JSON as returned by the endpoint"""
    return [
        {"id": 1, "title": "Backpack", "description": "Fits 15 inch laptops", "price": 109.95},
        {"id": 2, "title": "T-Shirt", "description": "Slim fit", "price": 22.3},
    ]


@pytest.fixture
def fetch_ok(sample_products):
    return FakeFetch(sample_products)


@pytest.fixture
def fetch_failing():
    return FakeFetch(CatalogUnavailableError("connection refused"))


@pytest.fixture
def make_fetch():
    """Build a FakeFetch returning (or raising) the given result."""
    return FakeFetch
