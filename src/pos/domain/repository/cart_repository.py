"""Abstract repository for the Cart aggregate (one open cart per register)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get(self, register_id: str) -> Cart:
        """Return the register's open cart, or a new empty one."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the register's open cart."""
