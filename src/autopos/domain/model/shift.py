"""Shift aggregate: one cashier's cash session.

A shift is opened with a counted float and closed with a counted drawer.
On close the expected drawer (float plus cash sales) is compared with
the count; the signed difference is kept as ``variance``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from autopos.domain.exceptions import ValidationError
from autopos.domain.model.value_objects import Money


class ShiftStatus(Enum):
    OPEN = "open"
    CLOSED = "closed"


@dataclass
class Shift:
    id: int | None
    staff_id: str
    opening_cash: Money
    status: ShiftStatus = ShiftStatus.OPEN
    start_time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    end_time: datetime | None = None
    closing_cash: Money | None = None
    total_sales: Money | None = None
    total_transactions: int | None = None
    expected_cash: Money | None = None
    variance: int | None = None  # closing - expected, may be negative

    @staticmethod
    def open(staff_id: str, opening_cash: Money) -> Shift:
        if not staff_id or not staff_id.strip():
            raise ValidationError("Staff ID is required to open a shift")
        return Shift(id=None, staff_id=staff_id.strip(), opening_cash=opening_cash)

    @property
    def is_open(self) -> bool:
        return self.status == ShiftStatus.OPEN

    def close(
        self,
        closing_cash: Money,
        total_sales: Money,
        total_transactions: int,
        cash_sales: Money,
        closed_at: datetime | None = None,
    ) -> None:
        """Transition OPEN -> CLOSED and record the drawer reconciliation."""
        if not self.is_open:
            raise ValidationError(f"Shift #{self.id} is already closed")

        self.expected_cash = self.opening_cash + cash_sales
        self.variance = closing_cash.amount - self.expected_cash.amount
        self.closing_cash = closing_cash
        self.total_sales = total_sales
        self.total_transactions = total_transactions
        self.end_time = closed_at or datetime.now(timezone.utc)
        self.status = ShiftStatus.CLOSED

    def duration_hours(self, now: datetime | None = None) -> int:
        """Whole hours elapsed, up to the end time or ``now`` if still open."""
        end = self.end_time or now or datetime.now(timezone.utc)
        return int((end - self.start_time).total_seconds() // 3600)
