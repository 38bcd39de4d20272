"""Promotion variants supplied by the promotions catalog.

The set of variants is closed.  Each one is resolved to a plain
``Percent`` (see ``pos.domain.service.promotion_resolver``) before it
reaches the pricing engine, so pricing never branches on promotion type.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Union

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money, Percent


class _Targeted:
    """Shared product targeting: an empty ``product_ids`` means every product."""

    product_ids: frozenset[str]

    def applies_to(self, product_id: str) -> bool:
        return not self.product_ids or product_id in self.product_ids

    @property
    def is_cart_wide(self) -> bool:
        return not self.product_ids


@dataclass(frozen=True)
class PercentageOff(_Targeted):
    name: str
    percent: Percent
    priority: int = 0
    product_ids: frozenset[str] = frozenset()


@dataclass(frozen=True)
class FixedOff(_Targeted):
    """A fixed amount off, converted to a percentage of what it applies to."""

    name: str
    amount: Money
    priority: int = 0
    product_ids: frozenset[str] = frozenset()


@dataclass(frozen=True)
class BuyXGetY(_Targeted):
    """``get_quantity`` free units for every ``buy_quantity`` bought."""

    name: str
    buy_quantity: int
    get_quantity: int
    priority: int = 0
    product_ids: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if self.buy_quantity <= 0 or self.get_quantity <= 0:
            raise ValidationError("Buy and get quantities must both be positive")


@dataclass(frozen=True)
class MemberOnly(_Targeted):
    """Percentage off granted only when a loyalty member is attached."""

    name: str
    percent: Percent
    priority: int = 0
    product_ids: frozenset[str] = frozenset()


@dataclass(frozen=True)
class HappyHour(_Targeted):
    """Percentage off inside a daily ``[starts_at, ends_at)`` window."""

    name: str
    percent: Percent
    starts_at: time = time(11, 0)
    ends_at: time = time(14, 0)
    priority: int = 0
    product_ids: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if self.starts_at >= self.ends_at:
            raise ValidationError("Happy hour must start before it ends")

    def is_open_at(self, at: time) -> bool:
        return self.starts_at <= at < self.ends_at


Promotion = Union[PercentageOff, FixedOff, BuyXGetY, MemberOnly, HappyHour]
