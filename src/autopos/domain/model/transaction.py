"""Transaction aggregate: a completed sale.

Items carry a snapshot of the product's name and price at checkout, so
later catalog edits never change a printed receipt.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from autopos.domain.model.checkout import OrderTotals, PaymentMethod
from autopos.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class TransactionItem:
    product_id: str
    product_name: str
    part_number: str
    quantity: Quantity
    unit_price: Money  # locked at checkout time

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Transaction:
    id: int | None
    staff_id: str
    shift_id: int | None
    items: list[TransactionItem]
    totals: OrderTotals
    payment_method: PaymentMethod
    customer_phone: str | None = None
    notes: str | None = None
    cashier_name: str | None = None  # session full name at checkout
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total(self) -> Money:
        return self.totals.total

    @property
    def is_cash(self) -> bool:
        return self.payment_method.is_cash
