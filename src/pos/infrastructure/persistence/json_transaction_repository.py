"""JSON-file-backed implementation of TransactionRepository.

Each commit rewrites the whole store through a temporary file and an
atomic rename, so a transaction is either fully on disk or absent.
"""

from __future__ import annotations

import asyncio
import json
import os
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from pos.domain.model.transaction import PaymentMethod, TransactionLine, TransactionRecord
from pos.domain.model.value_objects import Money, Percent
from pos.domain.repository.transaction_repository import TransactionRepository


class JsonTransactionRepository(TransactionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- TransactionRepository interface --------------------------------------

    async def commit(self, record: TransactionRecord) -> int:
        return await asyncio.to_thread(self._append, record)

    def get_by_id(self, transaction_id: int) -> TransactionRecord | None:
        for raw in self._load_raw():
            if raw["id"] == transaction_id:
                return self._to_domain(raw)
        return None

    def list_by_branch(self, branch_id: str, limit: int = 100) -> list[tuple[int, TransactionRecord]]:
        matching = [raw for raw in self._load_raw() if raw["branch_id"] == branch_id]
        matching.sort(key=lambda raw: (raw["created_at"], raw["id"]), reverse=True)
        return [(raw["id"], self._to_domain(raw)) for raw in matching[:limit]]

    # --- Storage --------------------------------------------------------------

    def _append(self, record: TransactionRecord) -> int:
        entries = self._load_raw()
        transaction_id = max((e["id"] for e in entries), default=0) + 1
        entries.append(self._to_raw(transaction_id, record))
        self._persist_raw(entries)
        return transaction_id

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(transaction_id: int, record: TransactionRecord) -> dict:
        return {
            "id": transaction_id,
            "branch_id": record.branch_id,
            "register_id": record.register_id,
            "customer_id": record.customer_id,
            "created_at": record.created_at.isoformat(),
            "payment_method": record.payment_method.value,
            "subtotal": str(record.subtotal.amount),
            "discount_amount": str(record.discount_amount.amount),
            "tax_amount": str(record.tax_amount.amount),
            "total": str(record.total.amount),
            "amount_paid": str(record.amount_paid.amount),
            "change_amount": str(record.change_amount.amount),
            "points_earned": record.points_earned,
            "notes": record.notes,
            "lines": [
                {
                    "product_id": line.product_id,
                    "product_name": line.product_name,
                    "quantity": line.quantity,
                    "unit_price": str(line.unit_price.amount),
                    "line_discount": str(line.line_discount.value),
                    "line_subtotal": str(line.line_subtotal.amount),
                    "discount_amount": str(line.discount_amount.amount),
                    "tax_amount": str(line.tax_amount.amount),
                }
                for line in record.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> TransactionRecord:
        lines = tuple(
            TransactionLine(
                product_id=i["product_id"],
                product_name=i["product_name"],
                quantity=i["quantity"],
                unit_price=Money.of(i["unit_price"]),
                line_discount=Percent(Decimal(i["line_discount"])),
                line_subtotal=Money.of(i["line_subtotal"]),
                discount_amount=Money.of(i["discount_amount"]),
                tax_amount=Money.of(i["tax_amount"]),
            )
            for i in raw["lines"]
        )
        return TransactionRecord(
            branch_id=raw["branch_id"],
            register_id=raw["register_id"],
            lines=lines,
            subtotal=Money.of(raw["subtotal"]),
            discount_amount=Money.of(raw["discount_amount"]),
            tax_amount=Money.of(raw["tax_amount"]),
            total=Money.of(raw["total"]),
            payment_method=PaymentMethod(raw["payment_method"]),
            amount_paid=Money.of(raw["amount_paid"]),
            change_amount=Money.of(raw["change_amount"]),
            points_earned=raw["points_earned"],
            customer_id=raw.get("customer_id"),
            notes=raw.get("notes"),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, entries: list[dict]) -> None:
        tmp_path = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(entries, indent=2) + "\n", encoding="utf-8")
        os.replace(tmp_path, self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
