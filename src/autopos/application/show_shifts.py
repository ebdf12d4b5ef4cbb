"""Application service: shift queries."""

from __future__ import annotations

from autopos.application.dto import ShiftDTO, shift_to_dto
from autopos.domain.model.session import Session
from autopos.domain.repository.shift_repository import ShiftRepository


class CurrentShiftHandler:

    def __init__(self, shift_repo: ShiftRepository) -> None:
        self._shift_repo = shift_repo

    def handle(self, session: Session) -> ShiftDTO | None:
        shift = self._shift_repo.get_open_for_staff(session.user_id)
        return shift_to_dto(shift) if shift is not None else None


class ListShiftsHandler:

    def __init__(self, shift_repo: ShiftRepository) -> None:
        self._shift_repo = shift_repo

    def handle(self, session: Session, limit: int = 10) -> list[ShiftDTO]:
        """The staff member's shifts, newest first."""
        shifts = [s for s in self._shift_repo.list_all() if s.staff_id == session.user_id]
        shifts.sort(key=lambda s: s.start_time, reverse=True)
        return [shift_to_dto(s) for s in shifts[:limit]]
