"""Domain service: Promotion Resolver.

Turns the promotions handed to us by the catalog into the effective
percentages the pricing engine understands.  A promotion naming
products, and any buy-X-get-Y deal, resolves per line; every other
promotion covers the whole sale and resolves to the cart discount.
Promotions do not stack: at each level the highest-priority promotion
that yields a non-zero discount wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Iterable

from pos.domain.model.cart import CartLine
from pos.domain.model.promotion import (
    BuyXGetY,
    FixedOff,
    HappyHour,
    MemberOnly,
    PercentageOff,
    Promotion,
)
from pos.domain.model.value_objects import Money, Percent

_PERCENT_SCALE = Decimal("0.0001")


@dataclass(frozen=True)
class PromotionContext:
    customer_id: str | None
    now: datetime


def is_line_level(promotion: Promotion) -> bool:
    return not promotion.is_cart_wide or isinstance(promotion, BuyXGetY)


def line_discount_for(promotion: Promotion, line: CartLine, ctx: PromotionContext) -> Percent:
    """Effective line discount granted by one promotion (zero if it does not apply)."""
    if not is_line_level(promotion) or not promotion.applies_to(line.product_id):
        return Percent.zero()

    if isinstance(promotion, BuyXGetY):
        qty = line.quantity.value
        free = (qty // (promotion.buy_quantity + promotion.get_quantity)) * promotion.get_quantity
        if free == 0:
            return Percent.zero()
        return Percent((Decimal(free * 100) / qty).quantize(_PERCENT_SCALE))

    if isinstance(promotion, FixedOff):
        return _fixed_as_percent(promotion.amount, line.gross_amount)

    return _percent_if_eligible(promotion, ctx)


def cart_discount_for(promotion: Promotion, subtotal: Money, ctx: PromotionContext) -> Percent:
    """Effective cart-wide discount for a promotion targeting the whole sale.

    Product-targeted promotions and buy-X-get-Y deals only make sense per
    line and resolve to zero here.
    """
    if is_line_level(promotion):
        return Percent.zero()
    if isinstance(promotion, FixedOff):
        return _fixed_as_percent(promotion.amount, subtotal)
    return _percent_if_eligible(promotion, ctx)


def best_line_discount(
    promotions: Iterable[Promotion],
    line: CartLine,
    ctx: PromotionContext,
) -> tuple[Promotion | None, Percent]:
    """Pick the winning promotion for a line.

    Ties on priority keep the catalog's order.
    """
    ranked = sorted(promotions, key=lambda p: p.priority, reverse=True)
    for promotion in ranked:
        discount = line_discount_for(promotion, line, ctx)
        if not discount.is_zero:
            return promotion, discount
    return None, Percent.zero()


def best_cart_discount(
    promotions: Iterable[Promotion],
    subtotal: Money,
    ctx: PromotionContext,
) -> tuple[Promotion | None, Percent]:
    """Pick the winning whole-sale promotion against a subtotal."""
    ranked = sorted(promotions, key=lambda p: p.priority, reverse=True)
    for promotion in ranked:
        discount = cart_discount_for(promotion, subtotal, ctx)
        if not discount.is_zero:
            return promotion, discount
    return None, Percent.zero()


# --- Internal helpers ---------------------------------------------------------


def _percent_if_eligible(promotion: Promotion, ctx: PromotionContext) -> Percent:
    if isinstance(promotion, PercentageOff):
        return promotion.percent
    if isinstance(promotion, MemberOnly):
        return promotion.percent if ctx.customer_id else Percent.zero()
    if isinstance(promotion, HappyHour):
        return promotion.percent if promotion.is_open_at(ctx.now.time()) else Percent.zero()
    raise TypeError(f"Unsupported promotion type: {type(promotion).__name__}")


def _fixed_as_percent(amount: Money, base: Money) -> Percent:
    if base.is_zero:
        return Percent.zero()
    ratio = min(amount.amount / base.amount * 100, Decimal("100"))
    return Percent(ratio.quantize(_PERCENT_SCALE))
