"""JSON-file-backed implementation of CartRepository.

One open cart per register, keyed by register ID.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

from pos.domain.model.cart import Cart, CartLine
from pos.domain.model.value_objects import Money, Percent, Quantity
from pos.domain.repository.cart_repository import CartRepository


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CartRepository interface ---------------------------------------------

    def get(self, register_id: str) -> Cart:
        raw = self._load_raw().get(register_id)
        if raw is None:
            return Cart(register_id=register_id)
        return self.cart_from_raw(raw)

    def save(self, cart: Cart) -> None:
        carts = self._load_raw()
        carts[cart.register_id] = self.cart_to_raw(cart)
        self._persist_raw(carts)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def cart_to_raw(cart: Cart) -> dict:
        return {
            "register_id": cart.register_id,
            "customer_id": cart.customer_id,
            "cart_discount": str(cart.cart_discount.value),
            "lines": [
                {
                    "product_id": line.product_id,
                    "product_name": line.product_name,
                    "quantity": line.quantity.value,
                    "unit_price": str(line.unit_price.amount),
                    "line_discount": str(line.line_discount.value),
                }
                for line in cart.lines
            ],
        }

    @staticmethod
    def cart_from_raw(raw: dict) -> Cart:
        lines = [
            CartLine(
                product_id=item["product_id"],
                product_name=item["product_name"],
                quantity=Quantity(item["quantity"]),
                unit_price=Money.of(item["unit_price"]),
                line_discount=Percent(Decimal(item.get("line_discount", "0"))),
            )
            for item in raw["lines"]
        ]
        return Cart(
            register_id=raw["register_id"],
            lines=lines,
            customer_id=raw.get("customer_id"),
            cart_discount=Percent(Decimal(raw.get("cart_discount", "0"))),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, carts: dict[str, dict]) -> None:
        self._file_path.write_text(json.dumps(carts, indent=2) + "\n", encoding="utf-8")

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
