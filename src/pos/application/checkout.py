"""Application service: Checkout use case.

Turns the register's cart into a committed TransactionRecord:

    IDLE -> PRICING -> VALIDATING -> COMMITTING -> COMPLETED

Any rejection drops back to IDLE with the reason kept on
``failure_reason``.  The cart is only cleared after the persistence
collaborator has confirmed the commit, so a failed checkout leaves it
exactly as it was.  Whatever the collaborator raises is reported as
CommitFailed, and failed commits are not retried here.

Without an explicit ``cart_discount`` the cart's own promotion-resolved
discount is used.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import structlog

from pos.application.pricing_settings import read_points_per_currency_unit, read_tax_rate
from pos.domain.exceptions import CommitFailed, DomainException, EmptyCart, InsufficientPayment
from pos.domain.model.cart import Cart
from pos.domain.model.transaction import PaymentMethod, TransactionLine, TransactionRecord
from pos.domain.model.value_objects import Money, Percent
from pos.domain.repository.settings_provider import SettingsProvider
from pos.domain.repository.transaction_repository import TransactionRepository
from pos.domain.service import loyalty, pricing_engine
from pos.domain.service.pricing_engine import PricingSummary

logger = structlog.get_logger(__name__)


class CheckoutState(Enum):
    IDLE = "IDLE"
    PRICING = "PRICING"
    VALIDATING = "VALIDATING"
    COMMITTING = "COMMITTING"
    COMPLETED = "COMPLETED"


@dataclass(frozen=True)
class CheckoutResult:
    transaction_id: int
    record: TransactionRecord


class CheckoutCoordinator:
    """One coordinator per register; a register checks out one cart at a time."""

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        settings: SettingsProvider,
        branch_id: str,
    ) -> None:
        self._transaction_repo = transaction_repo
        self._settings = settings
        self._branch_id = branch_id
        self.state = CheckoutState.IDLE
        self.failure_reason: str | None = None

    async def checkout(
        self,
        cart: Cart,
        payment_method: PaymentMethod,
        amount_paid: Money,
        cart_discount: Percent | None = None,
        notes: str | None = None,
    ) -> CheckoutResult:
        if cart_discount is None:
            cart_discount = cart.cart_discount
        log = logger.bind(branch_id=self._branch_id, register_id=cart.register_id)

        self.failure_reason = None
        self.state = CheckoutState.PRICING
        try:
            if cart.is_empty:
                raise EmptyCart("Cart is empty")

            tax_rate = read_tax_rate(self._settings)
            points_ratio = read_points_per_currency_unit(self._settings)
            summary = pricing_engine.price(cart.lines, cart_discount, tax_rate)

            self.state = CheckoutState.VALIDATING
            if amount_paid < summary.total:
                raise InsufficientPayment(
                    f"Amount paid {amount_paid} is less than total {summary.total}"
                )

            record = self._build_record(
                cart=cart,
                summary=summary,
                payment_method=payment_method,
                amount_paid=amount_paid,
                change_amount=amount_paid - summary.total,
                points_earned=loyalty.points_for(summary.total, points_ratio),
                notes=notes,
            )

            self.state = CheckoutState.COMMITTING
            transaction_id = await self._commit(record, log)
        except DomainException as exc:
            self.state = CheckoutState.IDLE
            self.failure_reason = str(exc)
            log.warning("checkout_rejected", error=type(exc).__name__, reason=str(exc))
            raise

        cart.clear()
        self.state = CheckoutState.COMPLETED
        log.info(
            "checkout_completed",
            transaction_id=transaction_id,
            total=str(record.total.amount),
            change=str(record.change_amount.amount),
            points_earned=record.points_earned,
        )
        return CheckoutResult(transaction_id=transaction_id, record=record)

    # --- Internal helpers -----------------------------------------------------

    async def _commit(self, record: TransactionRecord, log: structlog.BoundLogger) -> int:
        try:
            return await self._transaction_repo.commit(record)
        except Exception as exc:
            log.error("commit_failed", reason=str(exc), exc_info=True)
            raise CommitFailed(str(exc)) from exc

    def _build_record(
        self,
        cart: Cart,
        summary: PricingSummary,
        payment_method: PaymentMethod,
        amount_paid: Money,
        change_amount: Money,
        points_earned: int,
        notes: str | None,
    ) -> TransactionRecord:
        allocations = pricing_engine.prorate(cart.lines, summary)
        lines = tuple(
            TransactionLine(
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=line.quantity.value,
                unit_price=line.unit_price,
                line_discount=line.line_discount,
                line_subtotal=line.line_subtotal,
                discount_amount=share.discount_amount,
                tax_amount=share.tax_amount,
            )
            for line, share in zip(cart.lines, allocations)
        )
        return TransactionRecord(
            branch_id=self._branch_id,
            register_id=cart.register_id,
            lines=lines,
            subtotal=summary.subtotal,
            discount_amount=summary.discount_amount,
            tax_amount=summary.tax_amount,
            total=summary.total,
            payment_method=payment_method,
            amount_paid=amount_paid,
            change_amount=change_amount,
            points_earned=points_earned,
            customer_id=cart.customer_id,
            notes=notes,
        )
