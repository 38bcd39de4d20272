"""Abstract repository for carts parked with "hold" and resumed later."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from pos.domain.model.cart import Cart


@dataclass
class HeldCart:
    id: int | None
    cart: Cart
    note: str | None
    held_at: datetime


class HeldCartRepository(ABC):

    @abstractmethod
    def add(self, held: HeldCart) -> int:
        """Store a held cart and return its assigned ID."""

    @abstractmethod
    def get_by_id(self, held_id: int) -> HeldCart | None:
        """Return a held cart by ID, or None if not found."""

    @abstractmethod
    def list_by_register(self, register_id: str) -> list[HeldCart]:
        """Return the register's held carts, oldest first."""

    @abstractmethod
    def delete(self, held_id: int) -> None:
        """Forget a held cart (after resume or discard)."""
