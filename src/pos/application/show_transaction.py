"""Application service: Show Transaction use case (query)."""

from __future__ import annotations

from pos.application.dto import TransactionDTO, TransactionLineDTO
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.transaction import TransactionRecord
from pos.domain.repository.transaction_repository import TransactionRepository


class ShowTransactionHandler:

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._transaction_repo = transaction_repo

    def handle(self, transaction_id: int) -> TransactionDTO:
        record = self._transaction_repo.get_by_id(transaction_id)
        if record is None:
            raise EntityNotFoundError(f"Transaction #{transaction_id} not found")
        return to_dto(transaction_id, record)


def to_dto(transaction_id: int, record: TransactionRecord) -> TransactionDTO:
    return TransactionDTO(
        id=transaction_id,
        branch_id=record.branch_id,
        register_id=record.register_id,
        customer_id=record.customer_id,
        payment_method=record.payment_method.value,
        items=[
            TransactionLineDTO(
                product_name=line.product_name,
                quantity=line.quantity,
                unit_price=str(line.unit_price),
                line_discount=str(line.line_discount),
                line_subtotal=str(line.line_subtotal),
                discount_amount=str(line.discount_amount),
                tax_amount=str(line.tax_amount),
            )
            for line in record.lines
        ],
        subtotal=str(record.subtotal),
        discount_amount=str(record.discount_amount),
        tax_amount=str(record.tax_amount),
        total=str(record.total),
        amount_paid=str(record.amount_paid),
        change_amount=str(record.change_amount),
        points_earned=record.points_earned,
        notes=record.notes,
        created_at=record.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
