"""Stock movements and the inventory ledger.

``apply_stock_movement`` is pure: it returns the new stock level and the
signed delta to record. Persisting both is the caller's job (see
``StockLedgerService``).

``in`` sets stock to the given quantity rather than adding to it, the
same as ``adjustment``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from autopos.domain.exceptions import ValidationError


class MovementKind(Enum):
    IN = "in"
    OUT = "out"
    ADJUSTMENT = "adjustment"


@dataclass(frozen=True)
class StockChange:
    previous_stock: int
    new_stock: int
    ledger_delta: int


def apply_stock_movement(
    current_stock: int, kind: MovementKind, quantity: int
) -> StockChange:
    """Compute the effect of a movement on a product's stock.

    - ``in`` / ``adjustment``: stock is set to ``quantity``.
    - ``out``: stock decreases by ``quantity``, never below zero.

    The ledger delta is ``-quantity`` for ``out`` and ``+quantity``
    otherwise.
    """
    _require_non_negative_int(current_stock, "Current stock")
    _require_non_negative_int(quantity, "Movement quantity")

    if kind is MovementKind.OUT:
        return StockChange(
            previous_stock=current_stock,
            new_stock=max(0, current_stock - quantity),
            ledger_delta=-quantity,
        )
    return StockChange(
        previous_stock=current_stock,
        new_stock=quantity,
        ledger_delta=quantity,
    )


def _require_non_negative_int(value: int, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValidationError(f"{label} cannot be negative, got {value}")


# Reference types written to the ledger
REFERENCE_MANUAL = "manual"
REFERENCE_SALE = "sale"


@dataclass
class InventoryMovement:
    """One append-only ledger record.

    ``quantity`` holds the signed ledger delta, so summing a product's
    ``out`` records gives the units that left the shelf.
    """

    id: int | None
    product_id: str
    kind: MovementKind
    quantity: int
    reference_type: str = REFERENCE_MANUAL
    reference_id: str | None = None
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
