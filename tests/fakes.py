"""In-memory fakes for testing.

These implement the same abstract interfaces as the JSON adapters
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pos.domain.exceptions import SettingsUnavailable
from pos.domain.model.cart import Cart
from pos.domain.model.product import Product
from pos.domain.model.promotion import Promotion
from pos.domain.model.transaction import TransactionRecord
from pos.domain.model.value_objects import TaxRate
from pos.domain.repository.cart_repository import CartRepository
from pos.domain.repository.held_cart_repository import HeldCart, HeldCartRepository
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.repository.promotion_repository import PromotionRepository
from pos.domain.repository.settings_provider import SettingsProvider
from pos.domain.repository.transaction_repository import TransactionRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def find_by_code(self, code: str) -> Product | None:
        return next((p for p in self._store.values() if p.matches(code)), None)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product


class FakeCartRepository(CartRepository):

    def __init__(self) -> None:
        self._store: dict[str, Cart] = {}

    def get(self, register_id: str) -> Cart:
        return self._store.setdefault(register_id, Cart(register_id=register_id))

    def save(self, cart: Cart) -> None:
        self._store[cart.register_id] = cart


class FakeHeldCartRepository(HeldCartRepository):

    def __init__(self) -> None:
        self._store: dict[int, HeldCart] = {}
        self._next_id = 1

    def add(self, held: HeldCart) -> int:
        held.id = self._next_id
        self._next_id += 1
        self._store[held.id] = held
        return held.id

    def get_by_id(self, held_id: int) -> HeldCart | None:
        return self._store.get(held_id)

    def list_by_register(self, register_id: str) -> list[HeldCart]:
        return [h for h in self._store.values() if h.cart.register_id == register_id]

    def delete(self, held_id: int) -> None:
        self._store.pop(held_id, None)


class FakePromotionRepository(PromotionRepository):

    def __init__(self, promotions: list[Promotion] | None = None) -> None:
        self._promotions = list(promotions or [])

    def list_active(self, at: datetime) -> list[Promotion]:
        return list(self._promotions)


class FakeTransactionRepository(TransactionRepository):
    """Records commits; set ``fail_with`` to make the next commits raise."""

    def __init__(self) -> None:
        self._store: dict[int, TransactionRecord] = {}
        self._next_id = 1
        self.fail_with: Exception | None = None
        self.commit_calls = 0

    async def commit(self, record: TransactionRecord) -> int:
        self.commit_calls += 1
        if self.fail_with is not None:
            raise self.fail_with
        transaction_id = self._next_id
        self._next_id += 1
        self._store[transaction_id] = record
        return transaction_id

    def get_by_id(self, transaction_id: int) -> TransactionRecord | None:
        return self._store.get(transaction_id)

    def list_by_branch(self, branch_id: str, limit: int = 100) -> list[tuple[int, TransactionRecord]]:
        rows = [(tid, r) for tid, r in self._store.items() if r.branch_id == branch_id]
        rows.sort(key=lambda row: row[0], reverse=True)
        return rows[:limit]


class FakeSettingsProvider(SettingsProvider):

    def __init__(
        self,
        tax_rate: str = "0.10",
        points_per_currency_unit: str = "10",
        available: bool = True,
    ) -> None:
        self._tax_rate = TaxRate.of(tax_rate)
        self._points = Decimal(points_per_currency_unit)
        self.available = available

    def get_tax_rate(self) -> TaxRate:
        if not self.available:
            raise SettingsUnavailable("settings store offline")
        return self._tax_rate

    def get_points_per_currency_unit(self) -> Decimal:
        if not self.available:
            raise SettingsUnavailable("settings store offline")
        return self._points
