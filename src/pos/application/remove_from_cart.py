"""Application service: Remove From Cart use case."""

from __future__ import annotations

import structlog

from pos.application.cart_view import priced_cart_dto
from pos.application.dto import CartDTO
from pos.application.pricing_settings import read_tax_rate
from pos.domain.repository.cart_repository import CartRepository
from pos.domain.repository.settings_provider import SettingsProvider

logger = structlog.get_logger(__name__)


class RemoveFromCartHandler:

    def __init__(self, cart_repo: CartRepository, settings: SettingsProvider) -> None:
        self._cart_repo = cart_repo
        self._settings = settings

    def handle(self, register_id: str, product_id: str) -> CartDTO:
        """Remove a line.  Raises LineNotFound if the product is not in the cart."""
        cart = self._cart_repo.get(register_id)
        cart.remove_item(product_id)
        self._cart_repo.save(cart)

        logger.info("cart_item_removed", register_id=register_id, product_id=product_id)
        return priced_cart_dto(cart, cart.cart_discount, read_tax_rate(self._settings))
