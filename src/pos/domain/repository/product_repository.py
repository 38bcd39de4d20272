"""Read side of the catalog the register rings products up from."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def find_by_code(self, code: str) -> Product | None:
        """Return the product whose ID or SKU is ``code``, or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product, ordered by ID."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or repriced product."""
