"""Cart aggregate: the mutable basket rung up at a register.

The Cart is an aggregate root that owns its lines.  It keeps no total
of its own: every figure beyond a line subtotal is produced fresh by
the pricing engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from pos.domain.exceptions import LineNotFound, ValidationError
from pos.domain.model.value_objects import Money, Percent, Quantity


@dataclass
class CartLine:
    """A single product line.

    ``product_name`` and ``unit_price`` are snapshots taken when the
    product was first added; later catalog changes do not reach them.
    """

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money
    line_discount: Percent = field(default_factory=Percent.zero)

    @property
    def gross_amount(self) -> Money:
        return self.unit_price.multiply(self.quantity.value)

    @property
    def line_subtotal(self) -> Money:
        """quantity * unit price * (1 - line discount), rounded to the cent."""
        exact = (
            self.unit_price.amount
            * self.quantity.value
            * (Decimal("1") - self.line_discount.fraction)
        )
        return Money.from_decimal(exact)

    @property
    def line_discount_amount(self) -> Money:
        return self.gross_amount - self.line_subtotal


@dataclass
class Cart:
    """Aggregate root for one register's sale in progress.

    Invariants:
    - at most one line per ``product_id``
    - every line has quantity >= 1; a line driven to zero is removed
    - ``lines`` keeps insertion order, merged re-adds stay in place

    ``cart_discount`` is the whole-sale promotion last resolved for this
    cart.  It is a snapshot; changing the lines does not re-resolve it.
    """

    register_id: str
    lines: list[CartLine] = field(default_factory=list)
    customer_id: str | None = None
    cart_discount: Percent = field(default_factory=Percent.zero)

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for line in self.lines:
            if line.product_id in seen:
                raise ValidationError(
                    f"Duplicate line for product '{line.product_id}' in cart"
                )
            seen.add(line.product_id)

    # --- Mutations ------------------------------------------------------------

    def add_item(
        self,
        product_id: str,
        name: str,
        unit_price: Money,
        quantity: int = 1,
    ) -> CartLine:
        """Add ``quantity`` units, merging into an existing line if present."""
        added = Quantity(quantity)

        existing = self._get_line(product_id)
        if existing is not None:
            existing.quantity = Quantity(existing.quantity.value + added.value)
            return existing

        line = CartLine(
            product_id=product_id,
            product_name=name,
            quantity=added,
            unit_price=unit_price,
        )
        self.lines.append(line)
        return line

    def update_quantity(self, product_id: str, quantity: int) -> CartLine | None:
        """Set a line's quantity; zero or less removes the line.

        Returns the updated line, or None when the line was removed.
        """
        line = self._find_line(product_id)
        if quantity <= 0:
            self.lines.remove(line)
            return None
        line.quantity = Quantity(quantity)
        return line

    def remove_item(self, product_id: str) -> None:
        """Remove a line.  Raises LineNotFound if it is not in the cart."""
        self.lines.remove(self._find_line(product_id))

    def set_line_discount(self, product_id: str, discount: Percent) -> CartLine:
        line = self._find_line(product_id)
        line.line_discount = discount
        return line

    def set_cart_discount(self, discount: Percent) -> None:
        self.cart_discount = discount

    def clear(self) -> None:
        self.lines.clear()
        self.customer_id = None
        self.cart_discount = Percent.zero()

    def attach_customer(self, customer_id: str | None) -> None:
        self.customer_id = customer_id

    # --- Queries --------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def line_for(self, product_id: str) -> CartLine:
        return self._find_line(product_id)

    # --- Internal helpers -----------------------------------------------------

    def _get_line(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def _find_line(self, product_id: str) -> CartLine:
        line = self._get_line(product_id)
        if line is None:
            raise LineNotFound(f"Product ID '{product_id}' is not in the cart")
        return line
