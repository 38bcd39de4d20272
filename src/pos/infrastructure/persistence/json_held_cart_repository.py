"""JSON-file-backed implementation of HeldCartRepository."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from pos.domain.repository.held_cart_repository import HeldCart, HeldCartRepository
from pos.infrastructure.persistence.json_cart_repository import JsonCartRepository


class JsonHeldCartRepository(HeldCartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- HeldCartRepository interface -----------------------------------------

    def add(self, held: HeldCart) -> int:
        entries = self._load_raw()
        held.id = max((e["id"] for e in entries), default=0) + 1
        entries.append(self._to_raw(held))
        self._persist_raw(entries)
        return held.id

    def get_by_id(self, held_id: int) -> HeldCart | None:
        for raw in self._load_raw():
            if raw["id"] == held_id:
                return self._to_domain(raw)
        return None

    def list_by_register(self, register_id: str) -> list[HeldCart]:
        return [
            self._to_domain(raw)
            for raw in self._load_raw()
            if raw["cart"]["register_id"] == register_id
        ]

    def delete(self, held_id: int) -> None:
        entries = [raw for raw in self._load_raw() if raw["id"] != held_id]
        self._persist_raw(entries)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(held: HeldCart) -> dict:
        return {
            "id": held.id,
            "note": held.note,
            "held_at": held.held_at.isoformat(),
            "cart": JsonCartRepository.cart_to_raw(held.cart),
        }

    @staticmethod
    def _to_domain(raw: dict) -> HeldCart:
        return HeldCart(
            id=raw["id"],
            cart=JsonCartRepository.cart_from_raw(raw["cart"]),
            note=raw.get("note"),
            held_at=datetime.fromisoformat(raw["held_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, entries: list[dict]) -> None:
        self._file_path.write_text(json.dumps(entries, indent=2) + "\n", encoding="utf-8")

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
