from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from retail_demo.cart import ShoppingCart


@dataclass(frozen=True, slots=True)
class Order:
    """
    A named snapshot of a cart.

    The cart passed in is copied on construction; adding to or discounting
    the original afterwards does not change the order.
    """

    order_id: str
    cart: ShoppingCart

    def __post_init__(self) -> None:
        object.__setattr__(self, "cart", self.cart.snapshot())

    @property
    def total(self) -> Decimal:
        return self.cart.total

    def display(self) -> str:
        return f"=== Order {self.order_id} ===\n{self.cart.display()}"
