"""Application service: Dashboard query."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from autopos.application.dto import TransactionDTO, transaction_to_dto
from autopos.domain.model.value_objects import Money
from autopos.domain.repository.product_repository import ProductRepository
from autopos.domain.repository.shift_repository import ShiftRepository
from autopos.domain.repository.transaction_repository import TransactionRepository

RECENT_LIMIT = 5


@dataclass(frozen=True)
class DashboardDTO:
    day: str
    revenue: str
    transaction_count: int
    low_stock_count: int
    open_shift_count: int
    recent: list[TransactionDTO]


class DashboardHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        transaction_repo: TransactionRepository,
        shift_repo: ShiftRepository,
    ) -> None:
        self._product_repo = product_repo
        self._transaction_repo = transaction_repo
        self._shift_repo = shift_repo

    def handle(self, today: date | None = None) -> DashboardDTO:
        today = today or datetime.now().astimezone().date()

        todays = [
            t
            for t in self._transaction_repo.list_all()
            if t.created_at.astimezone().date() == today
        ]
        todays.sort(key=lambda t: (t.created_at, t.id or 0), reverse=True)

        revenue = Money.zero()
        for t in todays:
            revenue = revenue + t.total

        return DashboardDTO(
            day=today.strftime("%d/%m/%Y"),
            revenue=str(revenue),
            transaction_count=len(todays),
            low_stock_count=sum(
                1 for p in self._product_repo.list_all() if p.is_active and p.is_low_stock
            ),
            open_shift_count=sum(1 for s in self._shift_repo.list_all() if s.is_open),
            recent=[transaction_to_dto(t) for t in todays[:RECENT_LIMIT]],
        )
