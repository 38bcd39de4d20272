"""Application service: Add Product use case.

Seeds the local catalog the register rings products up from.
"""

from __future__ import annotations

import structlog

from pos.domain.exceptions import ValidationError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        sku: str | None = None,
        product_id: str | None = None,
    ) -> Product:
        catalog = self._product_repo.list_all()
        name = name.strip()
        if any(p.name.lower() == name.lower() for p in catalog):
            raise ValidationError(f"Product '{name}' already exists")
        if sku is not None and self._product_repo.find_by_code(sku) is not None:
            raise ValidationError(f"SKU '{sku}' is already in use")

        if product_id is None:
            numeric = [int(p.id) for p in catalog if p.id.isdigit()]
            product_id = str(max(numeric, default=0) + 1)
        elif self._product_repo.get_by_id(product_id) is not None:
            raise ValidationError(f"Product ID '{product_id}' already exists")

        product = Product(id=product_id, name=name, price=Money.of(price), sku=sku)
        self._product_repo.save(product)

        logger.info("product_added", product_id=product.id, sku=sku, price=str(product.price.amount))
        return product
