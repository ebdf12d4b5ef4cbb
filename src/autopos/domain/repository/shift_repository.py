"""Abstract repository for Shift aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from autopos.domain.model.shift import Shift


class ShiftRepository(ABC):

    @abstractmethod
    def get_by_id(self, shift_id: int) -> Shift | None:
        """Return a shift by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Shift]:
        """Return every shift in insertion order."""

    @abstractmethod
    def save(self, shift: Shift) -> None:
        """Persist a shift, assigning an ID when it has none."""

    def get_open_for_staff(self, staff_id: str) -> Shift | None:
        """Return the most recently started open shift of a staff member."""
        open_shifts = [
            s for s in self.list_all() if s.staff_id == staff_id and s.is_open
        ]
        if not open_shifts:
            return None
        return max(open_shifts, key=lambda s: s.start_time)
