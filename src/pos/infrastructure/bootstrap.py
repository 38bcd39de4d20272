"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from pos.application.checkout import CheckoutCoordinator
from pos.infrastructure.config import Settings, load_settings
from pos.infrastructure.persistence.json_cart_repository import JsonCartRepository
from pos.infrastructure.persistence.json_held_cart_repository import (
    JsonHeldCartRepository,
)
from pos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from pos.infrastructure.persistence.json_promotion_repository import (
    JsonPromotionRepository,
)
from pos.infrastructure.persistence.json_transaction_repository import (
    JsonTransactionRepository,
)
from pos.infrastructure.settings_provider import EnvSettingsProvider


@lru_cache(maxsize=1)
def settings() -> Settings:
    return load_settings()


def settings_provider() -> EnvSettingsProvider:
    return EnvSettingsProvider()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(settings().data_dir / "carts.json")


def held_cart_repository() -> JsonHeldCartRepository:
    return JsonHeldCartRepository(settings().data_dir / "held_carts.json")


def promotion_repository() -> JsonPromotionRepository:
    return JsonPromotionRepository(settings().data_dir / "promotions.json")


def transaction_repository() -> JsonTransactionRepository:
    return JsonTransactionRepository(settings().data_dir / "transactions.json")


def checkout_coordinator() -> CheckoutCoordinator:
    return CheckoutCoordinator(
        transaction_repo=transaction_repository(),
        settings=settings_provider(),
        branch_id=settings().branch_id,
    )
