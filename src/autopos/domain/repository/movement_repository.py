"""Abstract repository for the inventory movement ledger."""

from __future__ import annotations

from abc import ABC, abstractmethod

from autopos.domain.model.stock import InventoryMovement


class MovementRepository(ABC):

    @abstractmethod
    def add(self, movement: InventoryMovement) -> None:
        """Append a ledger record, assigning its ID."""

    @abstractmethod
    def list_all(self) -> list[InventoryMovement]:
        """Return every ledger record in insertion order."""

    @abstractmethod
    def remove(self, movement_id: int) -> None:
        """Delete a ledger record; used only to undo a failed checkout."""
