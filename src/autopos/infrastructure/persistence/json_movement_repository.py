"""JSON-file-backed implementation of MovementRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from autopos.domain.model.stock import InventoryMovement, MovementKind
from autopos.domain.repository.movement_repository import MovementRepository
from autopos.infrastructure.persistence.json_file import JsonFile


class JsonMovementRepository(MovementRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- MovementRepository interface -----------------------------------------

    def add(self, movement: InventoryMovement) -> None:
        records = self._file.load()
        movement.id = self._file.next_id(records)
        records.append(self._to_raw(movement))
        self._file.persist(records)

    def list_all(self) -> list[InventoryMovement]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def remove(self, movement_id: int) -> None:
        records = [r for r in self._file.load() if r["id"] != movement_id]
        self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(m: InventoryMovement) -> dict:
        return {
            "id": m.id,
            "product_id": m.product_id,
            "movement_type": m.kind.value,
            "quantity": m.quantity,
            "reference_type": m.reference_type,
            "reference_id": m.reference_id,
            "notes": m.notes,
            "created_at": m.created_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> InventoryMovement:
        return InventoryMovement(
            id=raw["id"],
            product_id=raw["product_id"],
            kind=MovementKind(raw["movement_type"]),
            quantity=raw["quantity"],
            reference_type=raw.get("reference_type", "manual"),
            reference_id=raw.get("reference_id"),
            notes=raw.get("notes"),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
