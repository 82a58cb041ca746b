from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Union

logger = logging.getLogger(__name__)

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    # float goes through str so 0.1 stays 0.1
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def is_valid_rate(rate: Decimal) -> bool:
    if rate.is_nan():
        return False
    return Decimal("0") <= rate <= Decimal("1")


def money(amount: Decimal) -> str:
    return f"${amount:.2f}"


class ProductCategory(str, Enum):
    GENERAL = "general"
    ELECTRONICS = "electronics"
    CLOTHING = "clothing"

    @property
    def label(self) -> str:
        if self is ProductCategory.GENERAL:
            return "Product"
        return self.value.capitalize()


class Discountable(ABC):
    """Anything a rate based discount can be computed for (an item) or applied to (a cart)."""

    @abstractmethod
    def apply_discount(self, rate: Number) -> Decimal: ...


@dataclass(eq=False)
class CatalogItem(Discountable):
    """
    A sellable item.

    Items are shared by reference between the catalog, cart lines and orders,
    so a stock change made through a cart is visible everywhere. Identity is
    the ``id`` alone: two items with the same id are equal whatever their
    category, price or stock.
    """

    id: str
    name: str
    price: Decimal
    stock: int

    category: ClassVar[ProductCategory] = ProductCategory.GENERAL

    def __post_init__(self) -> None:
        self.price = to_decimal(self.price)
        if self.price < 0:
            raise ValueError(f"price must be >= 0 for {self.id}: got {self.price}")
        if self.stock < 0:
            raise ValueError(f"stock must be >= 0 for {self.id}: got {self.stock}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CatalogItem):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def in_stock(self) -> bool:
        return self.stock > 0

    def _summary(self) -> str:
        return f"{self.category.label} [{self.id}] {self.name} - {money(self.price)} | Stock: {self.stock}"

    def display(self) -> str:
        return self._summary()

    def update_stock(self, delta: int) -> bool:
        if self.stock + delta < 0:
            logger.warning(f"Not enough stock of {self.name}")
            return False
        self.stock += delta
        logger.debug(f"[item={self.id}] stock updated by {delta} (stock={self.stock})")
        return True

    def apply_discount(self, rate: Number) -> Decimal:
        rate = to_decimal(rate)
        if not is_valid_rate(rate):
            return self.price
        return self.price * (1 - rate)


@dataclass(eq=False)
class Electronics(CatalogItem):
    warranty_months: int = 0

    category: ClassVar[ProductCategory] = ProductCategory.ELECTRONICS

    def display(self) -> str:
        return f"{self._summary()} | Warranty: {self.warranty_months} months"

    def update_stock(self, delta: int) -> bool:
        logger.info("(Electronics stock update includes fragile handling)")
        return super().update_stock(delta)


@dataclass(eq=False)
class Clothing(CatalogItem):
    size: str = ""

    category: ClassVar[ProductCategory] = ProductCategory.CLOTHING

    def display(self) -> str:
        return f"{self._summary()} | Size: {self.size}"
