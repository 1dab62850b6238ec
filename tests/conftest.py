"""
Pytest fixtures for feed export tests.
"""

import pytest
from decimal import Decimal

from feedgen.core.feed import FeedProduct


@pytest.fixture
def make_product():
    """Factory for FeedProduct with sensible defaults."""
    def _make(sku="SKU-1", name="Desk Lamp", price="10", final_price=None, product_url="/desk-lamp.html", **attributes):
        return FeedProduct(
            sku=sku,
            name=name,
            price=Decimal(price),
            final_price=Decimal(final_price) if final_price is not None else None,
            product_url=product_url,
            attributes=attributes,
        )
    return _make


@pytest.fixture
def products(make_product):
    """Two plain products."""
    return [
        make_product(sku="A-1", name="Lamp", price="19.99"),
        make_product(sku="B-2", name="Chair", price="45.50"),
    ]


@pytest.fixture
def read_feed(tmp_path):
    """Read a feed file under tmp_path as text, keeping line endings."""
    def _read(*parts):
        with open(tmp_path.joinpath(*parts), encoding="utf-8", newline="") as f:
            return f.read()
    return _read
