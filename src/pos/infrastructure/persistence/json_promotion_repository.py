"""JSON-file-backed, read-only implementation of PromotionRepository.

The file is maintained by the promotions back-office; each entry is::

    {"type": "percentage", "name": "Spring sale", "value": "10",
     "priority": 5, "product_ids": ["3"], "is_active": true,
     "start_date": "2026-03-01", "end_date": "2026-03-31"}

``type`` is one of percentage, fixed, buy_x_get_y, member_only or
happy_hour.  buy_x_get_y takes ``buy_quantity``/``get_quantity``
instead of ``value``; happy_hour accepts ``starts_at``/``ends_at``
as ``HH:MM``.
"""

from __future__ import annotations

import json
from datetime import date, datetime, time
from pathlib import Path

from pos.domain.exceptions import ValidationError
from pos.domain.model.promotion import (
    BuyXGetY,
    FixedOff,
    HappyHour,
    MemberOnly,
    PercentageOff,
    Promotion,
)
from pos.domain.model.value_objects import Money, Percent
from pos.domain.repository.promotion_repository import PromotionRepository


class JsonPromotionRepository(PromotionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    def list_active(self, at: datetime) -> list[Promotion]:
        if not self._file_path.exists():
            return []
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return [self._to_domain(item) for item in raw if self._is_active(item, at.date())]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _is_active(item: dict, today: date) -> bool:
        if not item.get("is_active", True):
            return False
        if "start_date" in item and date.fromisoformat(item["start_date"]) > today:
            return False
        if "end_date" in item and date.fromisoformat(item["end_date"]) < today:
            return False
        return True

    @staticmethod
    def _to_domain(item: dict) -> Promotion:
        kind = item["type"]
        name = item["name"]
        priority = item.get("priority", 0)
        product_ids = frozenset(str(p) for p in item.get("product_ids", []))

        if kind == "percentage":
            return PercentageOff(name, Percent.of(item["value"]), priority, product_ids)
        if kind == "fixed":
            return FixedOff(name, Money.of(item["value"]), priority, product_ids)
        if kind == "buy_x_get_y":
            return BuyXGetY(
                name, item["buy_quantity"], item["get_quantity"], priority, product_ids
            )
        if kind == "member_only":
            return MemberOnly(name, Percent.of(item["value"]), priority, product_ids)
        if kind == "happy_hour":
            return HappyHour(
                name,
                Percent.of(item["value"]),
                time.fromisoformat(item.get("starts_at", "11:00")),
                time.fromisoformat(item.get("ends_at", "14:00")),
                priority,
                product_ids,
            )
        raise ValidationError(f"Unknown promotion type '{kind}' for '{name}'")
