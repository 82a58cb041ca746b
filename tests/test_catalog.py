"""Tests for the in-memory catalog."""
from decimal import Decimal

import pytest

from retail_demo.models import Clothing, Electronics


def test_seed_helpers_build_variants(catalog):
    assert isinstance(catalog.find("E01"), Electronics)
    assert catalog.find("E01").warranty_months == 24
    assert isinstance(catalog.find("C01"), Clothing)
    assert catalog.find("C01").size == "L"
    assert catalog.items.size() == 4


def test_find_missing(catalog):
    assert catalog.find("NOPE") is None


def test_duplicate_id_rejected(catalog):
    with pytest.raises(ValueError, match="already in catalog"):
        catalog.add_product("P01", "Another Book", price=Decimal("1.00"), stock=1)

    assert catalog.items.size() == 4  # Unchanged


def test_display_lists_items_in_order(catalog):
    lines = catalog.display().splitlines()

    assert [line.split("]")[0] for line in lines] == [
        "Product [P01",
        "Electronics [E01",
        "Clothing [C01",
        "Product [P02",
    ]
