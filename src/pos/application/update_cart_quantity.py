"""Application service: Update Cart Quantity use case.

A quantity of zero or less removes the line.
"""

from __future__ import annotations

import structlog

from pos.application.cart_view import priced_cart_dto
from pos.application.dto import CartDTO
from pos.application.pricing_settings import read_tax_rate
from pos.domain.repository.cart_repository import CartRepository
from pos.domain.repository.settings_provider import SettingsProvider

logger = structlog.get_logger(__name__)


class UpdateCartQuantityHandler:

    def __init__(self, cart_repo: CartRepository, settings: SettingsProvider) -> None:
        self._cart_repo = cart_repo
        self._settings = settings

    def handle(self, register_id: str, product_id: str, quantity: int) -> CartDTO:
        cart = self._cart_repo.get(register_id)
        line = cart.update_quantity(product_id, quantity)
        self._cart_repo.save(cart)

        if line is None:
            logger.info("cart_item_removed", register_id=register_id, product_id=product_id)
        else:
            logger.info(
                "cart_quantity_updated",
                register_id=register_id,
                product_id=product_id,
                quantity=line.quantity.value,
            )
        return priced_cart_dto(cart, cart.cart_discount, read_tax_rate(self._settings))
