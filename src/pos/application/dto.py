"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money is pre-formatted.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed on the register."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_discount: str  # e.g. "10%"
    line_subtotal: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the cart with a freshly computed pricing summary."""

    register_id: str
    customer_id: str | None
    items: list[CartLineDTO]
    cart_discount: str
    tax_rate: str
    subtotal: str
    discount_amount: str
    taxable_amount: str
    tax_amount: str
    total: str


@dataclass(frozen=True)
class TransactionLineDTO:
    product_name: str
    quantity: int
    unit_price: str
    line_discount: str
    line_subtotal: str
    discount_amount: str
    tax_amount: str


@dataclass(frozen=True)
class TransactionDTO:
    """Output: a committed transaction as printed on a receipt."""

    id: int
    branch_id: str
    register_id: str
    customer_id: str | None
    payment_method: str
    items: list[TransactionLineDTO]
    subtotal: str
    discount_amount: str
    tax_amount: str
    total: str
    amount_paid: str
    change_amount: str
    points_earned: int
    notes: str | None
    created_at: str


@dataclass(frozen=True)
class HeldCartDTO:
    id: int
    note: str | None
    line_count: int
    held_at: str
