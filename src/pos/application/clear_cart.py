"""Application service: Clear Cart use case (explicit cancel of the sale)."""

from __future__ import annotations

import structlog

from pos.domain.repository.cart_repository import CartRepository

logger = structlog.get_logger(__name__)


class ClearCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, register_id: str) -> None:
        cart = self._cart_repo.get(register_id)
        dropped = len(cart.lines)
        cart.clear()
        self._cart_repo.save(cart)
        logger.info("cart_cleared", register_id=register_id, lines_dropped=dropped)
