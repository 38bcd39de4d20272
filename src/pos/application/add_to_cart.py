"""Application service: Add To Cart use case.

Looks the product up in the catalog once, so the line carries the
price as it was when the product was rung up.
"""

from __future__ import annotations

import structlog

from pos.application.cart_view import priced_cart_dto
from pos.application.dto import CartDTO
from pos.application.pricing_settings import read_tax_rate
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.repository.cart_repository import CartRepository
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.repository.settings_provider import SettingsProvider

logger = structlog.get_logger(__name__)


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        settings: SettingsProvider,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._settings = settings

    def handle(self, register_id: str, code: str, quantity: int = 1) -> CartDTO:
        """Ring up a product by its ID or scanned SKU."""
        product = self._product_repo.find_by_code(code)
        if product is None:
            raise EntityNotFoundError(f"No product with ID or SKU '{code}'")

        cart = self._cart_repo.get(register_id)
        line = cart.add_item(
            product_id=product.id,
            name=product.name,
            unit_price=product.price,  # <-- price snapshot
            quantity=quantity,
        )
        self._cart_repo.save(cart)

        logger.info(
            "cart_item_added",
            register_id=register_id,
            product_id=product.id,
            quantity=line.quantity.value,
        )
        return priced_cart_dto(cart, cart.cart_discount, read_tax_rate(self._settings))
