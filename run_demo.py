from __future__ import annotations

import argparse
import logging
from decimal import Decimal, InvalidOperation

from retail_demo.cart import ShoppingCart
from retail_demo.catalog import Catalog
from retail_demo.order import Order


def seed(catalog: Catalog) -> None:
    catalog.add_product("P01", "Book", price=Decimal("10.00"), stock=5)
    catalog.add_electronics("E01", "Laptop", price=Decimal("1200.00"), stock=2, warranty_months=24)
    catalog.add_clothing("C01", "T-Shirt", price=Decimal("20.00"), stock=3, size="L")


def discount_rate(value: str) -> Decimal:
    try:
        return Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid discount rate: {value!r}")


def percent(rate: Decimal) -> str:
    return f"{(rate * 100).normalize():f}%"


def main() -> None:
    p = argparse.ArgumentParser(description="Walk a cart from catalog to order and print each stage.")
    p.add_argument("--discount", type=discount_rate, default=Decimal("0.1"), help="Discount rate in [0, 1]")
    p.add_argument("--order-id", type=str, default="O001")
    p.add_argument("--verbose", action="store_true", help="Debug logging")
    args = p.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

    catalog = Catalog()
    seed(catalog)
    book, laptop, shirt = (catalog.find(item_id) for item_id in ("P01", "E01", "C01"))

    print("\n--- INVENTORY ---")
    print(catalog.display())

    cart = ShoppingCart()
    cart += book
    cart += laptop
    cart += shirt
    cart += laptop  # second laptop -> quantity 2
    cart += laptop  # out of stock

    print("\n--- CART BEFORE DISCOUNT ---")
    print(cart.display())

    print(f"\nApplying {percent(args.discount)} discount...")
    cart.apply_discount(args.discount)
    print(cart.display())

    print("\nCompare Book and Laptop:", "same" if book == laptop else "different")

    order = Order(args.order_id, cart)
    print()
    print(order.display())


if __name__ == "__main__":
    main()
