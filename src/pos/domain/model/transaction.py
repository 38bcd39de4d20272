"""TransactionRecord: the immutable result of a completed checkout.

A record is created only by a successful checkout and handed to the
persistence collaborator.  Refunds and voids are separate compensating
records and never touch an existing one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from pos.domain.model.value_objects import Money, Percent


class PaymentMethod(Enum):
    CASH = "cash"
    CARD = "card"
    EWALLET = "ewallet"
    MIXED = "mixed"


@dataclass(frozen=True)
class TransactionLine:
    """Per-line breakdown as persisted.

    ``discount_amount`` and ``tax_amount`` are this line's prorated
    share of the cart-wide discount and tax.
    """

    product_id: str
    product_name: str
    quantity: int
    unit_price: Money
    line_discount: Percent
    line_subtotal: Money
    discount_amount: Money
    tax_amount: Money


@dataclass(frozen=True)
class TransactionRecord:
    branch_id: str
    register_id: str
    lines: tuple[TransactionLine, ...]
    subtotal: Money
    discount_amount: Money
    tax_amount: Money
    total: Money
    payment_method: PaymentMethod
    amount_paid: Money
    change_amount: Money
    points_earned: int
    customer_id: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
