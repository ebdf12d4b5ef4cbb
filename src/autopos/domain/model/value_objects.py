"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from autopos.domain.exceptions import ValidationError

DEFAULT_CURRENCY = "IDR"

_PLAIN_DIGITS = re.compile(r"[0-9]+(?:\.[0-9]+)?")
# "1.250.000" or "1,250,000": one separator kind, strict groups of three
_GROUPED_DIGITS = re.compile(r"[0-9]{1,3}(?:\.[0-9]{3})+|[0-9]{1,3}(?:,[0-9]{3})+")


@dataclass(frozen=True)
class Money:
    """Monetary amount held as an integer count of minor units.

    Rupiah are used without a fractional part, so one unit of ``amount``
    is one rupiah. Integer arithmetic keeps totals exact.
    """

    amount: int
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValidationError(
                f"Money amount must be an int, got {type(self.amount).__name__}"
            )
        if self.amount < 0:
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < 0:
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    def __mul__(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Can only multiply Money by int, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    def apply_rate(self, rate: Decimal) -> Money:
        """Multiply by a rate, rounding half up to a whole minor unit."""
        scaled = (Decimal(self.amount) * rate).quantize(
            Decimal("1"), rounding=ROUND_HALF_UP
        )
        return Money(int(scaled), self.currency)

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return format_rupiah(self.amount)

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(0, currency)

    @staticmethod
    def of(amount: str | int | Decimal) -> Money:
        """Coerce user input to Money.

        Accepts ints, integral Decimals and digit strings. In strings a
        "." or "," counts as a thousands separator only between groups of
        three digits ("50.000", "1,250,000"); anything else, such as
        "12.50" or "100000,5", is rejected, as are fractional amounts.
        """
        if isinstance(amount, str):
            cleaned = amount.strip().replace("_", "")
            if cleaned.lower().startswith("rp"):
                cleaned = cleaned[2:].strip()
            if _GROUPED_DIGITS.fullmatch(cleaned):
                cleaned = cleaned.replace(".", "").replace(",", "")
            elif not _PLAIN_DIGITS.fullmatch(cleaned):
                raise ValidationError(f"Invalid money amount: {amount!r}")
            value = Decimal(cleaned)
        elif isinstance(amount, (int, Decimal)) and not isinstance(amount, bool):
            value = Decimal(amount)
        else:
            raise ValidationError(f"Invalid money amount: {amount!r}")

        if not value.is_finite() or value != value.to_integral_value():
            raise ValidationError(f"Invalid money amount: {amount!r}")
        return Money(int(value))


def format_rupiah(amount: int) -> str:
    """Format a signed integer amount the Indonesian way: ``Rp 1.234.567``."""
    sign = "-" if amount < 0 else ""
    grouped = f"{abs(amount):,}".replace(",", ".")
    return f"{sign}Rp {grouped}"


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)
