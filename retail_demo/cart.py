from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List

from retail_demo.models import CatalogItem, Discountable, Number, is_valid_rate, money, to_decimal

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CartLine:
    item: CatalogItem
    quantity: int = 1


class ShoppingCart(Discountable):
    """
    Cart lines plus a running total.

    The total grows by the item's price at the moment of each successful
    ``add_item`` call and is only ever changed again by ``apply_discount``;
    it is not derived from the line quantities.
    """

    def __init__(self) -> None:
        self.lines: List[CartLine] = []
        self.total: Decimal = Decimal("0.00")

    def add_item(self, item: CatalogItem) -> ShoppingCart:
        if item.stock <= 0:
            logger.warning(f"Cannot add {item.name} (out of stock)")
            return self

        line = self._find_line(item)
        if line is not None:
            line.quantity += 1
        else:
            self.lines.append(CartLine(item=item))

        self.total += item.price
        item.update_stock(-1)
        logger.info(f"[cart] added {item.id} (total={self.total})")
        return self

    def __iadd__(self, item: CatalogItem) -> ShoppingCart:
        return self.add_item(item)

    def _find_line(self, item: CatalogItem) -> CartLine | None:
        return next((line for line in self.lines if line.item == item), None)

    def quantity_of(self, item: CatalogItem) -> int:
        line = self._find_line(item)
        return line.quantity if line is not None else 0

    def apply_discount(self, rate: Number) -> Decimal:
        rate = to_decimal(rate)
        if not is_valid_rate(rate):
            logger.debug(f"[cart] discount ignored: rate={rate} (total={self.total})")
            return self.total
        self.total *= 1 - rate
        logger.info(f"[cart] discount applied: rate={rate} (total={self.total})")
        return self.total

    def snapshot(self) -> ShoppingCart:
        # new lines, same (shared) items
        copy = ShoppingCart()
        copy.lines = [CartLine(item=line.item, quantity=line.quantity) for line in self.lines]
        copy.total = self.total
        return copy

    def display(self) -> str:
        rows = ["=== Cart Contents ==="]
        rows.extend(f"{line.quantity}x {line.item.display()}" for line in self.lines)
        rows.append(f"Total: {money(self.total)}")
        return "\n".join(rows)
