"""Application service: Show Cart use case (query).

Every call prices the cart from scratch; nothing is cached between
mutations.
"""

from __future__ import annotations

from pos.application.cart_view import priced_cart_dto
from pos.application.dto import CartDTO
from pos.application.pricing_settings import read_tax_rate
from pos.domain.model.value_objects import Percent
from pos.domain.repository.cart_repository import CartRepository
from pos.domain.repository.settings_provider import SettingsProvider


class ShowCartHandler:

    def __init__(self, cart_repo: CartRepository, settings: SettingsProvider) -> None:
        self._cart_repo = cart_repo
        self._settings = settings

    def handle(self, register_id: str, cart_discount: str | None = None) -> CartDTO:
        """Price the cart; an explicit ``cart_discount`` overrides the cart's own."""
        cart = self._cart_repo.get(register_id)
        discount = cart.cart_discount if cart_discount is None else Percent.of(cart_discount)
        return priced_cart_dto(cart, discount, read_tax_rate(self._settings))
