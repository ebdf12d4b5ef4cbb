"""Order totals calculation.

A pure function over a list of line items. Nothing here touches a
repository; the checkout use case calls it before any write happens.

Order of operations:
    subtotal = sum(unit_price * quantity)
    tax      = round_half_up(subtotal * 11%)     # on the pre-discount subtotal
    total    = subtotal + tax - discount
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Iterable

from autopos.domain.exceptions import InsufficientPayment, ValidationError
from autopos.domain.model.value_objects import Money, Quantity

TAX_RATE = Decimal("0.11")


class PaymentMethod(Enum):
    CASH = "cash"
    CARD = "card"
    TRANSFER = "transfer"
    QRIS = "qris"

    @property
    def is_cash(self) -> bool:
        return self is PaymentMethod.CASH


@dataclass(frozen=True)
class LineItem:
    unit_price: Money
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class OrderTotals:
    """Immutable snapshot of a checkout's amounts."""

    subtotal: Money
    tax: Money
    discount: Money
    total: Money
    tendered: Money
    change: Money


def compute_order_totals(
    line_items: Iterable[LineItem],
    payment_method: PaymentMethod,
    tendered: Money | None = None,
    discount: Money | None = None,
) -> OrderTotals:
    """Compute subtotal, tax, discount, total and change.

    Raises InsufficientPayment when a cash payment does not cover the
    total. For card, transfer and QRIS the tendered amount is recorded
    as given and change is always zero.
    """
    subtotal = Money.zero()
    for item in line_items:
        subtotal = subtotal + item.line_total

    tax = subtotal.apply_rate(TAX_RATE)
    discount = discount if discount is not None else Money.zero()

    gross = subtotal + tax
    if discount > gross:
        raise ValidationError(
            f"Discount {discount} exceeds the order amount {gross}"
        )
    total = gross - discount

    paid = tendered if tendered is not None else total

    if payment_method.is_cash:
        if paid < total:
            raise InsufficientPayment(total=total, tendered=paid)
        change = paid - total
    else:
        change = Money.zero()

    return OrderTotals(
        subtotal=subtotal,
        tax=tax,
        discount=discount,
        total=total,
        tendered=paid,
        change=change,
    )
