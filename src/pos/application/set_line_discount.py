"""Application service: Set Line Discount use case (manual override)."""

from __future__ import annotations

import structlog

from pos.application.cart_view import priced_cart_dto
from pos.application.dto import CartDTO
from pos.application.pricing_settings import read_tax_rate
from pos.domain.model.value_objects import Percent
from pos.domain.repository.cart_repository import CartRepository
from pos.domain.repository.settings_provider import SettingsProvider

logger = structlog.get_logger(__name__)


class SetLineDiscountHandler:

    def __init__(self, cart_repo: CartRepository, settings: SettingsProvider) -> None:
        self._cart_repo = cart_repo
        self._settings = settings

    def handle(self, register_id: str, product_id: str, percent: str) -> CartDTO:
        discount = Percent.of(percent)

        cart = self._cart_repo.get(register_id)
        cart.set_line_discount(product_id, discount)
        self._cart_repo.save(cart)

        logger.info(
            "line_discount_set",
            register_id=register_id,
            product_id=product_id,
            percent=str(discount.value),
        )
        return priced_cart_dto(cart, cart.cart_discount, read_tax_rate(self._settings))
