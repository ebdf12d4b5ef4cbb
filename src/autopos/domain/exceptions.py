"""Domain-level exceptions.

Every business rule violation is a subclass of DomainException so the
CLI layer can catch them uniformly and display a readable message.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class NoActiveShift(DomainException):
    """The staff member has no open shift."""


class PermissionDenied(DomainException):
    """The session's role may not use the requested section."""


class InsufficientPayment(DomainException):
    """Cash tendered does not cover the order total.

    The checkout must be blocked; nothing is committed.
    """

    def __init__(self, total, tendered) -> None:
        self.total = total
        self.tendered = tendered
        self.shortfall = total.amount - tendered.amount
        super().__init__(
            f"Payment of {tendered} is less than the total of {total}"
        )
