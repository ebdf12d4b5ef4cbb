"""JSON-file-backed implementation of ShiftRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from autopos.domain.model.shift import Shift, ShiftStatus
from autopos.domain.model.value_objects import Money
from autopos.domain.repository.shift_repository import ShiftRepository
from autopos.infrastructure.persistence.json_file import JsonFile


def _money(value: int | None) -> Money | None:
    return Money(value) if value is not None else None


def _amount(money: Money | None) -> int | None:
    return money.amount if money is not None else None


class JsonShiftRepository(ShiftRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ShiftRepository interface --------------------------------------------

    def get_by_id(self, shift_id: int) -> Shift | None:
        for raw in self._file.load():
            if raw["id"] == shift_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Shift]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, shift: Shift) -> None:
        records = self._file.load()
        if shift.id is None:
            shift.id = self._file.next_id(records)

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(records):
            if raw["id"] == shift.id:
                records[i] = self._to_raw(shift)
                break
        else:
            records.append(self._to_raw(shift))
        self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(shift: Shift) -> dict:
        return {
            "id": shift.id,
            "staff_id": shift.staff_id,
            "status": shift.status.value,
            "start_time": shift.start_time.isoformat(),
            "end_time": shift.end_time.isoformat() if shift.end_time else None,
            "opening_cash": shift.opening_cash.amount,
            "closing_cash": _amount(shift.closing_cash),
            "total_sales": _amount(shift.total_sales),
            "total_transactions": shift.total_transactions,
            "expected_cash": _amount(shift.expected_cash),
            "variance": shift.variance,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Shift:
        return Shift(
            id=raw["id"],
            staff_id=raw["staff_id"],
            opening_cash=Money(raw["opening_cash"]),
            status=ShiftStatus(raw["status"]),
            start_time=datetime.fromisoformat(raw["start_time"]),
            end_time=datetime.fromisoformat(raw["end_time"]) if raw.get("end_time") else None,
            closing_cash=_money(raw.get("closing_cash")),
            total_sales=_money(raw.get("total_sales")),
            total_transactions=raw.get("total_transactions"),
            expected_cash=_money(raw.get("expected_cash")),
            variance=raw.get("variance"),
        )
