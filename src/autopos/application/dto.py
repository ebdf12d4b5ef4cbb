"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals. Amounts are pre-formatted for display.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from autopos.domain.model.shift import Shift
from autopos.domain.model.transaction import Transaction
from autopos.domain.model.value_objects import format_rupiah

DATE_FORMAT = "%d/%m/%Y %H:%M"


def format_local(moment: datetime) -> str:
    """Stored UTC timestamp shown in the machine's local time zone."""
    return moment.astimezone().strftime(DATE_FORMAT)


@dataclass(frozen=True)
class CartLineSpec:
    """Input: a product reference (ID, part number, barcode or name) and quantity."""

    product: str
    quantity: int


@dataclass(frozen=True)
class TransactionItemDTO:
    product_name: str
    part_number: str
    quantity: int
    unit_price: str  # formatted, e.g. "Rp 50.000"
    subtotal: str


@dataclass(frozen=True)
class TransactionDTO:
    id: int
    staff_id: str
    cashier_name: str
    shift_id: int | None
    items: list[TransactionItemDTO]
    subtotal: str
    tax: str
    discount: str
    total: str
    payment_method: str
    tendered: str
    change: str
    has_discount: bool
    has_change: bool
    customer_phone: str | None
    notes: str | None
    created_at: str


@dataclass(frozen=True)
class ShiftDTO:
    id: int
    staff_id: str
    status: str
    start_time: str
    end_time: str | None
    duration_hours: int
    opening_cash: str
    closing_cash: str | None
    total_sales: str | None
    total_transactions: int
    expected_cash: str | None
    variance: str | None


def transaction_to_dto(transaction: Transaction) -> TransactionDTO:
    totals = transaction.totals
    return TransactionDTO(
        id=transaction.id,  # type: ignore[arg-type]
        staff_id=transaction.staff_id,
        cashier_name=transaction.cashier_name or transaction.staff_id,
        shift_id=transaction.shift_id,
        items=[
            TransactionItemDTO(
                product_name=item.product_name,
                part_number=item.part_number,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                subtotal=str(item.subtotal),
            )
            for item in transaction.items
        ],
        subtotal=str(totals.subtotal),
        tax=str(totals.tax),
        discount=str(totals.discount),
        total=str(totals.total),
        payment_method=transaction.payment_method.value,
        tendered=str(totals.tendered),
        change=str(totals.change),
        has_discount=not totals.discount.is_zero,
        has_change=not totals.change.is_zero,
        customer_phone=transaction.customer_phone,
        notes=transaction.notes,
        created_at=format_local(transaction.created_at),
    )


def shift_to_dto(shift: Shift) -> ShiftDTO:
    def fmt(money) -> str | None:
        return str(money) if money is not None else None

    return ShiftDTO(
        id=shift.id,  # type: ignore[arg-type]
        staff_id=shift.staff_id,
        status=shift.status.value,
        start_time=format_local(shift.start_time),
        end_time=format_local(shift.end_time) if shift.end_time else None,
        duration_hours=shift.duration_hours(),
        opening_cash=str(shift.opening_cash),
        closing_cash=fmt(shift.closing_cash),
        total_sales=fmt(shift.total_sales),
        total_transactions=shift.total_transactions or 0,
        expected_cash=fmt(shift.expected_cash),
        variance=format_rupiah(shift.variance) if shift.variance is not None else None,
    )
