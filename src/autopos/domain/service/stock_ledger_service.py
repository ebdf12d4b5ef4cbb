"""Domain service: Stock Ledger.

Applies a stock movement to a product and appends the matching ledger
record. The two writes go to different repositories, so the service
restores the product's previous stock if the ledger append fails, and
offers ``revert`` so a caller can undo a whole movement later.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from autopos.domain.model.product import Product
from autopos.domain.model.stock import (
    REFERENCE_MANUAL,
    InventoryMovement,
    MovementKind,
    apply_stock_movement,
)
from autopos.domain.repository.movement_repository import MovementRepository
from autopos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordedMovement:
    """What ``record`` did, with enough state to undo it."""

    product_id: str
    previous_stock: int
    new_stock: int
    movement: InventoryMovement


class StockLedgerService:

    def __init__(
        self,
        product_repo: ProductRepository,
        movement_repo: MovementRepository,
    ) -> None:
        self._product_repo = product_repo
        self._movement_repo = movement_repo

    def record(
        self,
        product: Product,
        kind: MovementKind,
        quantity: int,
        notes: str | None = None,
        reference_type: str = REFERENCE_MANUAL,
        reference_id: str | None = None,
    ) -> RecordedMovement:
        change = apply_stock_movement(product.stock, kind, quantity)

        product.set_stock(change.new_stock)
        self._product_repo.save(product)

        movement = InventoryMovement(
            id=None,
            product_id=product.id,
            kind=kind,
            quantity=change.ledger_delta,
            reference_type=reference_type,
            reference_id=reference_id,
            notes=notes,
        )
        try:
            self._movement_repo.add(movement)
        except Exception:
            logger.warning(
                "ledger append failed for product %s; restoring stock to %d",
                product.id,
                change.previous_stock,
            )
            product.set_stock(change.previous_stock)
            self._product_repo.save(product)
            raise

        logger.info(
            "stock %s product=%s %d -> %d (delta %+d)",
            kind.value,
            product.id,
            change.previous_stock,
            change.new_stock,
            change.ledger_delta,
        )
        return RecordedMovement(
            product_id=product.id,
            previous_stock=change.previous_stock,
            new_stock=change.new_stock,
            movement=movement,
        )

    def revert(self, recorded: RecordedMovement) -> None:
        """Undo a recorded movement: restore the stock, drop the ledger row."""
        product = self._product_repo.get_by_id(recorded.product_id)
        if product is not None:
            product.set_stock(recorded.previous_stock)
            self._product_repo.save(product)

        if recorded.movement.id is not None:
            self._movement_repo.remove(recorded.movement.id)
        logger.warning(
            "reverted stock movement on product %s back to %d",
            recorded.product_id,
            recorded.previous_stock,
        )
