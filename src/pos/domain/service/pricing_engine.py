"""Domain service: Pricing Engine.

Pure functions that turn cart lines into a priced summary.  Nothing
here reads settings or holds state; the caller passes the cart
discount and the tax rate for every call.

Rounding points: each line subtotal is rounded to the cent (it is shown
and persisted per line).  The discount is computed exactly and rounded
half-up once; taxable is then the subtotal less that rounded discount.
Tax is computed exactly on the taxable amount and rounded half-up once,
and total is taxable plus rounded tax.  The summary therefore always
satisfies taxable == subtotal - discount and total == taxable + tax.
For example a 37.05 taxable amount at 10% gives an exact tax of 3.705,
reported as 3.71, and a total of 40.76.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from pos.domain.model.cart import CartLine
from pos.domain.model.value_objects import Money, Percent, TaxRate


@dataclass(frozen=True)
class PricingSummary:
    """Derived figures for one pricing request.  Never cached."""

    subtotal: Money
    discount_amount: Money
    taxable_amount: Money
    tax_amount: Money
    total: Money

    @staticmethod
    def empty() -> PricingSummary:
        zero = Money.zero()
        return PricingSummary(zero, zero, zero, zero, zero)


@dataclass(frozen=True)
class LineAllocation:
    """One line's share of the cart-wide discount and tax."""

    product_id: str
    discount_amount: Money
    tax_amount: Money


def price(
    lines: Iterable[CartLine],
    cart_discount: Percent,
    tax_rate: TaxRate,
) -> PricingSummary:
    """Price a set of lines.

    1. subtotal is the sum of line subtotals (line discounts already applied)
    2. the cart discount is taken off that subtotal (successive, not additive)
    3. tax is charged on what remains
    """
    subtotal = sum((line.line_subtotal for line in lines), Money.zero())
    if subtotal.is_zero:
        return PricingSummary.empty()

    discount = subtotal.percent(cart_discount)
    taxable = subtotal - discount
    tax = Money.from_decimal(taxable.amount * tax_rate.value)

    return PricingSummary(
        subtotal=subtotal,
        discount_amount=discount,
        taxable_amount=taxable,
        tax_amount=tax,
        total=taxable + tax,
    )


def prorate(lines: Sequence[CartLine], summary: PricingSummary) -> list[LineAllocation]:
    """Split the summary's discount and tax across lines by subtotal share.

    Uses the largest-remainder method on whole cents so the per-line
    amounts always add back up to the summary figures exactly.
    """
    weights = [line.line_subtotal.cents for line in lines]
    discounts = _allocate(summary.discount_amount.cents, weights)
    taxes = _allocate(summary.tax_amount.cents, weights)
    return [
        LineAllocation(
            product_id=line.product_id,
            discount_amount=Money(discount),
            tax_amount=Money(tax),
        )
        for line, discount, tax in zip(lines, discounts, taxes)
    ]


def _allocate(total_cents: int, weights: list[int]) -> list[int]:
    """Distribute ``total_cents`` proportionally to ``weights``.

    Each share is floored, then the leftover cents go one at a time to
    the largest fractional remainders (earlier lines win ties).
    """
    weight_sum = sum(weights)
    if weight_sum == 0:
        # Nothing to weigh by; only a zero total can arrive here.
        return [0] * len(weights)

    shares: list[int] = []
    remainders: list[tuple[int, int]] = []
    for index, weight in enumerate(weights):
        share, remainder = divmod(total_cents * weight, weight_sum)
        shares.append(share)
        remainders.append((remainder, index))

    leftover = total_cents - sum(shares)
    for _, index in sorted(remainders, key=lambda r: (-r[0], r[1]))[:leftover]:
        shares[index] += 1
    return shares
