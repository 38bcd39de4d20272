"""Abstract persistence collaborator for completed transactions.

``commit`` is the only operation in the checkout path that may suspend.
In production the back-office collaborator behind this port records the
sale, decrements stock and credits loyalty points atomically.  The JSON
adapter in this package only stores the record.  Any exception an
implementation raises is reported to the caller as CommitFailed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.transaction import TransactionRecord


class TransactionRepository(ABC):

    @abstractmethod
    async def commit(self, record: TransactionRecord) -> int:
        """Persist a completed transaction and return its ID."""

    @abstractmethod
    def get_by_id(self, transaction_id: int) -> TransactionRecord | None:
        """Return a committed transaction, or None if not found."""

    @abstractmethod
    def list_by_branch(self, branch_id: str, limit: int = 100) -> list[tuple[int, TransactionRecord]]:
        """Return ``(id, record)`` pairs for a branch, newest first."""
