from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from retail_demo.inventory import InventoryList
from retail_demo.models import CatalogItem, Clothing, Electronics

logger = logging.getLogger(__name__)


class Catalog:
    """
    In-memory catalog.

    Holds the items themselves, not copies: a cart that takes stock from an
    item found here changes what ``display`` shows.
    """

    def __init__(self) -> None:
        self.items: InventoryList[CatalogItem] = InventoryList()

    def add(self, item: CatalogItem) -> CatalogItem:
        if self.find(item.id) is not None:
            raise ValueError(f"Item {item.id} already in catalog")
        self.items.add(item)
        logger.debug(f"[catalog] added {item.category.value} {item.id}")
        return item

    # Seed helpers
    def add_product(self, item_id: str, name: str, price: Decimal, stock: int) -> CatalogItem:
        return self.add(CatalogItem(id=item_id, name=name, price=price, stock=stock))

    def add_electronics(
        self, item_id: str, name: str, price: Decimal, stock: int, warranty_months: int
    ) -> Electronics:
        item = Electronics(id=item_id, name=name, price=price, stock=stock, warranty_months=warranty_months)
        self.add(item)
        return item

    def add_clothing(self, item_id: str, name: str, price: Decimal, stock: int, size: str) -> Clothing:
        item = Clothing(id=item_id, name=name, price=price, stock=stock, size=size)
        self.add(item)
        return item

    def find(self, item_id: str) -> Optional[CatalogItem]:
        return next((item for item in self.items if item.id == item_id), None)

    def display(self) -> str:
        return self.items.display_all()
