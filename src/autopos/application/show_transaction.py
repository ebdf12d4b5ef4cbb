"""Application service: transaction queries."""

from __future__ import annotations

from autopos.application.dto import TransactionDTO, transaction_to_dto
from autopos.domain.exceptions import EntityNotFoundError
from autopos.domain.repository.transaction_repository import TransactionRepository


class ShowTransactionHandler:

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._transaction_repo = transaction_repo

    def handle(self, transaction_id: int) -> TransactionDTO:
        transaction = self._transaction_repo.get_by_id(transaction_id)
        if transaction is None:
            raise EntityNotFoundError(f"Transaction #{transaction_id} not found")
        return transaction_to_dto(transaction)


class ListTransactionsHandler:

    def __init__(self, transaction_repo: TransactionRepository) -> None:
        self._transaction_repo = transaction_repo

    def handle(
        self, limit: int | None = None, shift_id: int | None = None
    ) -> list[TransactionDTO]:
        """Transactions newest first, optionally for one shift."""
        if shift_id is not None:
            transactions = self._transaction_repo.list_by_shift(shift_id)
        else:
            transactions = self._transaction_repo.list_all()
        transactions.sort(key=lambda t: (t.created_at, t.id or 0), reverse=True)
        if limit is not None:
            transactions = transactions[:limit]
        return [transaction_to_dto(t) for t in transactions]
