"""Pytest fixtures for the retail demo."""

from decimal import Decimal

import pytest

from retail_demo.cart import ShoppingCart
from retail_demo.catalog import Catalog


@pytest.fixture
def catalog() -> Catalog:
    catalog = Catalog()

    catalog.add_product("P01", "Book", price=Decimal("10.00"), stock=5)
    catalog.add_electronics("E01", "Laptop", price=Decimal("1200.00"), stock=2, warranty_months=24)
    catalog.add_clothing("C01", "T-Shirt", price=Decimal("20.00"), stock=3, size="L")
    catalog.add_product("P02", "Notebook", price=Decimal("3.50"), stock=0)  # Out of stock

    return catalog


@pytest.fixture
def cart() -> ShoppingCart:
    return ShoppingCart()
