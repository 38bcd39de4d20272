"""Application service: List Transactions use case (query)."""

from __future__ import annotations

from pos.application.dto import TransactionDTO
from pos.application.show_transaction import to_dto
from pos.domain.repository.transaction_repository import TransactionRepository


class ListTransactionsHandler:

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._transaction_repo = transaction_repo

    def handle(self, branch_id: str, limit: int = 100) -> list[TransactionDTO]:
        """Most recent transactions for a branch, newest first."""
        return [
            to_dto(transaction_id, record)
            for transaction_id, record in self._transaction_repo.list_by_branch(branch_id, limit)
        ]
