"""Application service: Record Stock Movement use case."""

from __future__ import annotations

from autopos.application.search_products import resolve_product
from autopos.domain.exceptions import ValidationError
from autopos.domain.model.stock import MovementKind
from autopos.domain.repository.movement_repository import MovementRepository
from autopos.domain.repository.product_repository import ProductRepository
from autopos.domain.service.stock_ledger_service import (
    RecordedMovement,
    StockLedgerService,
)


class RecordStockMovementHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        movement_repo: MovementRepository,
    ) -> None:
        self._product_repo = product_repo
        self._movement_repo = movement_repo

    def handle(
        self,
        product: str,
        kind: str | MovementKind,
        quantity: int,
        notes: str | None = None,
    ) -> RecordedMovement:
        """Apply an in / out / adjustment movement to a product."""
        target = resolve_product(self._product_repo, product)
        if not target.is_active:
            raise ValidationError(f"Product '{target.name}' is inactive")

        if not isinstance(kind, MovementKind):
            try:
                kind = MovementKind(kind.strip().lower())
            except ValueError as exc:
                raise ValidationError(
                    f"Unknown movement type '{kind}' (expected in, out or adjustment)"
                ) from exc

        ledger = StockLedgerService(self._product_repo, self._movement_repo)
        return ledger.record(target, kind, quantity, notes=notes or None)
