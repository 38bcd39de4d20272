"""Application service: Hold Cart use case.

Parks the register's open cart under an optional note and leaves the
register with an empty cart, so another customer can be served.
"""

from __future__ import annotations

from datetime import datetime, timezone

import structlog

from pos.domain.exceptions import EmptyCart
from pos.domain.model.cart import Cart
from pos.domain.repository.cart_repository import CartRepository
from pos.domain.repository.held_cart_repository import HeldCart, HeldCartRepository

logger = structlog.get_logger(__name__)


class HoldCartHandler:

    def __init__(self, cart_repo: CartRepository, held_repo: HeldCartRepository) -> None:
        self._cart_repo = cart_repo
        self._held_repo = held_repo

    def handle(self, register_id: str, note: str | None = None) -> int:
        cart = self._cart_repo.get(register_id)
        if cart.is_empty:
            raise EmptyCart("Cannot hold an empty cart")

        parked = Cart(
            register_id=register_id,
            lines=list(cart.lines),
            customer_id=cart.customer_id,
            cart_discount=cart.cart_discount,
        )
        held_id = self._held_repo.add(
            HeldCart(id=None, cart=parked, note=note, held_at=datetime.now(timezone.utc))
        )

        cart.clear()
        self._cart_repo.save(cart)

        logger.info("cart_held", register_id=register_id, held_id=held_id, lines=len(parked.lines))
        return held_id
