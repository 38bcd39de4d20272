"""Application service: Resume Held Cart use case."""

from __future__ import annotations

import structlog

from pos.application.cart_view import priced_cart_dto
from pos.application.dto import CartDTO
from pos.application.pricing_settings import read_tax_rate
from pos.domain.exceptions import EntityNotFoundError, ValidationError
from pos.domain.repository.cart_repository import CartRepository
from pos.domain.repository.held_cart_repository import HeldCartRepository
from pos.domain.repository.settings_provider import SettingsProvider

logger = structlog.get_logger(__name__)


class ResumeHeldCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        held_repo: HeldCartRepository,
        settings: SettingsProvider,
    ) -> None:
        self._cart_repo = cart_repo
        self._held_repo = held_repo
        self._settings = settings

    def handle(self, register_id: str, held_id: int) -> CartDTO:
        """Restore a held cart as the register's open cart.

        The register's current cart must be empty; it is never merged.
        """
        held = self._held_repo.get_by_id(held_id)
        if held is None:
            raise EntityNotFoundError(f"Held cart #{held_id} not found")

        current = self._cart_repo.get(register_id)
        if not current.is_empty:
            raise ValidationError(
                "Finish or hold the current sale before resuming another cart"
            )

        cart = held.cart
        cart.register_id = register_id
        self._cart_repo.save(cart)
        self._held_repo.delete(held_id)

        logger.info("cart_resumed", register_id=register_id, held_id=held_id)
        return priced_cart_dto(cart, cart.cart_discount, read_tax_rate(self._settings))
