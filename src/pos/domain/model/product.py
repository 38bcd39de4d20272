"""Product as seen by the register.

The catalog itself is owned elsewhere; the register only needs enough
of a product to seed a cart line with a price snapshot, plus the SKU
printed on the shelf label so a scanner can find it.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money


@dataclass
class Product:
    """A sellable catalog entry.

    Mutable because the catalog reprices products.  Cart lines never
    follow a reprice: they copy ``price`` when the product is rung up.
    """

    id: str
    name: str
    price: Money
    sku: str | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if self.sku is not None and not self.sku.strip():
            raise ValidationError("SKU must not be blank")

    def matches(self, code: str) -> bool:
        """True when ``code`` is this product's ID or SKU (case-insensitive)."""
        if code == self.id:
            return True
        return self.sku is not None and self.sku.lower() == code.lower()
