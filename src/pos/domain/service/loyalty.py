"""Domain service: loyalty points accrual."""

from __future__ import annotations

from decimal import ROUND_FLOOR, Decimal

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money


def points_for(total: Money, points_per_currency_unit: Decimal) -> int:
    """Points earned on a post-tax total, always rounded down.

    ``points_per_currency_unit`` is the spend that earns one point,
    so 47.30 at 10 per point earns 4.
    """
    if points_per_currency_unit <= 0:
        raise ValidationError(
            f"Points ratio must be positive, got {points_per_currency_unit}"
        )
    return int((total.amount / points_per_currency_unit).to_integral_value(rounding=ROUND_FLOOR))
