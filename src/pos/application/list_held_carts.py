"""Application service: List Held Carts use case (query)."""

from __future__ import annotations

from pos.application.dto import HeldCartDTO
from pos.domain.repository.held_cart_repository import HeldCartRepository


class ListHeldCartsHandler:

    def __init__(self, held_repo: HeldCartRepository) -> None:
        self._held_repo = held_repo

    def handle(self, register_id: str) -> list[HeldCartDTO]:
        return [
            HeldCartDTO(
                id=held.id,  # type: ignore[arg-type]
                note=held.note,
                line_count=len(held.cart.lines),
                held_at=held.held_at.strftime("%Y-%m-%d %H:%M UTC"),
            )
            for held in self._held_repo.list_by_register(register_id)
        ]
