"""JSON-file-backed implementation of ProductRepository.

The catalog file maps product ID to ``{"name", "price", "sku"}`` with
prices stored as decimal strings.
"""

from __future__ import annotations

import json
from pathlib import Path

from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        raw = self._load_raw().get(product_id)
        return None if raw is None else self._to_domain(product_id, raw)

    def find_by_code(self, code: str) -> Product | None:
        for product in self.list_all():
            if product.matches(code):
                return product
        return None

    def list_all(self) -> list[Product]:
        catalog = self._load_raw()
        return [self._to_domain(pid, catalog[pid]) for pid in sorted(catalog, key=_id_sort_key)]

    def save(self, product: Product) -> None:
        catalog = self._load_raw()
        catalog[product.id] = self._to_raw(product)
        self._file_path.write_text(json.dumps(catalog, indent=2) + "\n", encoding="utf-8")

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {"name": product.name, "price": str(product.price.amount), "sku": product.sku}

    @staticmethod
    def _to_domain(product_id: str, raw: dict) -> Product:
        return Product(
            id=product_id,
            name=raw["name"],
            price=Money.of(raw["price"]),
            sku=raw.get("sku"),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")


def _id_sort_key(product_id: str) -> tuple[int, int, str]:
    # numeric IDs first, in numeric order
    if product_id.isdigit():
        return (0, int(product_id), "")
    return (1, 0, product_id)
