"""Abstract repository for Transaction aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from autopos.domain.model.transaction import Transaction


class TransactionRepository(ABC):

    @abstractmethod
    def get_by_id(self, transaction_id: int) -> Transaction | None:
        """Return a transaction by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Transaction]:
        """Return every transaction in insertion order."""

    @abstractmethod
    def save(self, transaction: Transaction) -> None:
        """Persist a transaction, assigning an ID when it has none."""

    @abstractmethod
    def remove(self, transaction_id: int) -> None:
        """Delete a transaction; used only to undo a failed checkout."""

    def list_by_shift(self, shift_id: int) -> list[Transaction]:
        return [t for t in self.list_all() if t.shift_id == shift_id]
