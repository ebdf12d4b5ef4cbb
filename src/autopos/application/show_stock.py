"""Application service: stock queries (report and ledger history)."""

from __future__ import annotations

from dataclasses import dataclass

from autopos.application.dto import format_local
from autopos.domain.model.value_objects import Money
from autopos.domain.repository.movement_repository import MovementRepository
from autopos.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class StockLineDTO:
    product_id: str
    product_name: str
    part_number: str
    stock: int
    min_stock: int
    status: str  # "ok", "low" or "out"


@dataclass(frozen=True)
class StockReportDTO:
    total_products: int
    low_stock_count: int
    out_of_stock_count: int
    stock_value: str
    lines: list[StockLineDTO]

    @property
    def low_stock_lines(self) -> list[StockLineDTO]:
        return [line for line in self.lines if line.status != "ok"]


@dataclass(frozen=True)
class MovementLineDTO:
    id: int
    product_name: str
    kind: str
    quantity: int
    reference: str
    notes: str
    created_at: str


class StockReportHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> StockReportDTO:
        products = sorted(
            (p for p in self._product_repo.list_all() if p.is_active),
            key=lambda p: p.name.lower(),
        )

        value = Money.zero()
        for p in products:
            value = value + p.stock_value

        return StockReportDTO(
            total_products=len(products),
            low_stock_count=sum(1 for p in products if p.is_low_stock),
            out_of_stock_count=sum(1 for p in products if p.is_out_of_stock),
            stock_value=str(value),
            lines=[
                StockLineDTO(
                    product_id=p.id,
                    product_name=p.name,
                    part_number=p.part_number,
                    stock=p.stock,
                    min_stock=p.min_stock,
                    status="out" if p.is_out_of_stock else "low" if p.is_low_stock else "ok",
                )
                for p in products
            ],
        )


class MovementHistoryHandler:

    def __init__(
        self,
        movement_repo: MovementRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._movement_repo = movement_repo
        self._product_repo = product_repo

    def handle(
        self, product_id: str | None = None, limit: int | None = None
    ) -> list[MovementLineDTO]:
        """Ledger records, newest first."""
        movements = [
            m
            for m in self._movement_repo.list_all()
            if product_id is None or m.product_id == product_id
        ]
        movements.sort(key=lambda m: (m.created_at, m.id or 0), reverse=True)
        if limit is not None:
            movements = movements[:limit]

        names = {p.id: p.name for p in self._product_repo.list_all()}
        return [
            MovementLineDTO(
                id=m.id,  # type: ignore[arg-type]
                product_name=names.get(m.product_id, f"#{m.product_id}"),
                kind=m.kind.value,
                quantity=m.quantity,
                reference=(
                    f"{m.reference_type} #{m.reference_id}"
                    if m.reference_id
                    else m.reference_type
                ),
                notes=m.notes or "",
                created_at=format_local(m.created_at),
            )
            for m in movements
        ]
