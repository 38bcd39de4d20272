"""Application service: Apply Promotions use case.

Resolves the catalog's active promotions against the register's cart:

- promotions naming products (and buy-X-get-Y deals) become line
  discounts; lines with no applicable promotion keep whatever discount
  they already carry, so a manual override is not wiped out
- whole-sale promotions become the cart discount checkout prices with

The result is a snapshot; run it again after changing the cart.
"""

from __future__ import annotations

from datetime import datetime

import structlog

from pos.application.cart_view import priced_cart_dto
from pos.application.dto import CartDTO
from pos.application.pricing_settings import read_tax_rate
from pos.domain.model.value_objects import Money
from pos.domain.repository.cart_repository import CartRepository
from pos.domain.repository.promotion_repository import PromotionRepository
from pos.domain.repository.settings_provider import SettingsProvider
from pos.domain.service.promotion_resolver import (
    PromotionContext,
    best_cart_discount,
    best_line_discount,
)

logger = structlog.get_logger(__name__)


class ApplyPromotionsHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        promotion_repo: PromotionRepository,
        settings: SettingsProvider,
    ) -> None:
        self._cart_repo = cart_repo
        self._promotion_repo = promotion_repo
        self._settings = settings

    def handle(
        self,
        register_id: str,
        customer_id: str | None = None,
        now: datetime | None = None,
    ) -> CartDTO:
        now = now or datetime.now()
        cart = self._cart_repo.get(register_id)
        if customer_id is not None:
            cart.attach_customer(customer_id)

        promotions = self._promotion_repo.list_active(now)
        ctx = PromotionContext(customer_id=cart.customer_id, now=now)

        for line in cart.lines:
            promotion, discount = best_line_discount(promotions, line, ctx)
            if promotion is None:
                continue
            cart.set_line_discount(line.product_id, discount)
            logger.info(
                "promotion_applied",
                register_id=register_id,
                product_id=line.product_id,
                promotion=promotion.name,
                percent=str(discount.value),
            )

        # Whole-sale promotions are measured against the post-line-discount subtotal.
        subtotal = sum((line.line_subtotal for line in cart.lines), Money.zero())
        promotion, discount = best_cart_discount(promotions, subtotal, ctx)
        cart.set_cart_discount(discount)
        if promotion is not None:
            logger.info(
                "cart_promotion_applied",
                register_id=register_id,
                promotion=promotion.name,
                percent=str(discount.value),
            )

        self._cart_repo.save(cart)
        return priced_cart_dto(cart, cart.cart_discount, read_tax_rate(self._settings))
