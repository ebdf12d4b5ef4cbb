"""Application service: Open Shift use case."""

from __future__ import annotations

import logging

from autopos.application.dto import ShiftDTO, shift_to_dto
from autopos.domain.exceptions import ValidationError
from autopos.domain.model.session import Session
from autopos.domain.model.shift import Shift
from autopos.domain.model.value_objects import Money
from autopos.domain.repository.shift_repository import ShiftRepository

logger = logging.getLogger(__name__)


class OpenShiftHandler:

    def __init__(self, shift_repo: ShiftRepository) -> None:
        self._shift_repo = shift_repo

    def handle(self, session: Session, opening_cash: str | int) -> ShiftDTO:
        """Open a cash session with the counted float."""
        existing = self._shift_repo.get_open_for_staff(session.user_id)
        if existing is not None:
            raise ValidationError(
                f"Shift #{existing.id} is already open for {session.user_id}"
            )

        shift = Shift.open(session.user_id, Money.of(opening_cash))
        self._shift_repo.save(shift)
        logger.info(
            "shift #%s opened by %s with %s", shift.id, shift.staff_id, shift.opening_cash
        )
        return shift_to_dto(shift)
