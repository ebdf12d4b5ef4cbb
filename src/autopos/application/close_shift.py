"""Application service: Close Shift use case.

Totals come from the transactions recorded against the shift; the
expected drawer counts only cash sales.
"""

from __future__ import annotations

import logging

from autopos.application.dto import ShiftDTO, shift_to_dto
from autopos.domain.exceptions import NoActiveShift
from autopos.domain.model.session import Session
from autopos.domain.model.value_objects import Money
from autopos.domain.repository.shift_repository import ShiftRepository
from autopos.domain.repository.transaction_repository import TransactionRepository

logger = logging.getLogger(__name__)


class CloseShiftHandler:

    def __init__(
        self,
        shift_repo: ShiftRepository,
        transaction_repo: TransactionRepository,
    ) -> None:
        self._shift_repo = shift_repo
        self._transaction_repo = transaction_repo

    def handle(self, session: Session, closing_cash: str | int) -> ShiftDTO:
        shift = self._shift_repo.get_open_for_staff(session.user_id)
        if shift is None:
            raise NoActiveShift(f"No active shift to close for {session.user_id}")

        transactions = self._transaction_repo.list_by_shift(shift.id)  # type: ignore[arg-type]
        total_sales = Money.zero()
        cash_sales = Money.zero()
        for t in transactions:
            total_sales = total_sales + t.total
            if t.is_cash:
                cash_sales = cash_sales + t.total

        shift.close(
            closing_cash=Money.of(closing_cash),
            total_sales=total_sales,
            total_transactions=len(transactions),
            cash_sales=cash_sales,
        )
        self._shift_repo.save(shift)
        logger.info(
            "shift #%s closed: %d sales totalling %s, variance %+d",
            shift.id,
            len(transactions),
            total_sales,
            shift.variance,
        )
        return shift_to_dto(shift)
