"""JSON-file-backed implementation of TransactionRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from autopos.domain.model.checkout import OrderTotals, PaymentMethod
from autopos.domain.model.transaction import Transaction, TransactionItem
from autopos.domain.model.value_objects import DEFAULT_CURRENCY, Money, Quantity
from autopos.domain.repository.transaction_repository import TransactionRepository
from autopos.infrastructure.persistence.json_file import JsonFile


class JsonTransactionRepository(TransactionRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- TransactionRepository interface --------------------------------------

    def get_by_id(self, transaction_id: int) -> Transaction | None:
        for raw in self._file.load():
            if raw["id"] == transaction_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Transaction]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, transaction: Transaction) -> None:
        records = self._file.load()
        if transaction.id is None:
            transaction.id = self._file.next_id(records)

        for i, raw in enumerate(records):
            if raw["id"] == transaction.id:
                records[i] = self._to_raw(transaction)
                break
        else:
            records.append(self._to_raw(transaction))
        self._file.persist(records)

    def remove(self, transaction_id: int) -> None:
        records = [r for r in self._file.load() if r["id"] != transaction_id]
        self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(t: Transaction) -> dict:
        totals = t.totals
        return {
            "id": t.id,
            "staff_id": t.staff_id,
            "cashier_name": t.cashier_name,
            "shift_id": t.shift_id,
            "transaction_date": t.created_at.isoformat(),
            "currency": totals.total.currency,
            "subtotal": totals.subtotal.amount,
            "tax": totals.tax.amount,
            "discount": totals.discount.amount,
            "total_amount": totals.total.amount,
            "payment_method": t.payment_method.value,
            "payment_amount": totals.tendered.amount,
            "change_amount": totals.change.amount,
            "customer_phone": t.customer_phone,
            "notes": t.notes,
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "part_number": item.part_number,
                    "quantity": item.quantity.value,
                    "unit_price": item.unit_price.amount,
                    "subtotal": item.subtotal.amount,
                }
                for item in t.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Transaction:
        currency = raw.get("currency", DEFAULT_CURRENCY)

        def money(key: str) -> Money:
            return Money(raw[key], currency)

        return Transaction(
            id=raw["id"],
            staff_id=raw["staff_id"],
            shift_id=raw.get("shift_id"),
            items=[
                TransactionItem(
                    product_id=i["product_id"],
                    product_name=i["product_name"],
                    part_number=i.get("part_number", ""),
                    quantity=Quantity(i["quantity"]),
                    unit_price=Money(i["unit_price"], currency),
                )
                for i in raw["items"]
            ],
            totals=OrderTotals(
                subtotal=money("subtotal"),
                tax=money("tax"),
                discount=money("discount"),
                total=money("total_amount"),
                tendered=money("payment_amount"),
                change=money("change_amount"),
            ),
            payment_method=PaymentMethod(raw["payment_method"]),
            customer_phone=raw.get("customer_phone"),
            notes=raw.get("notes"),
            cashier_name=raw.get("cashier_name"),
            created_at=datetime.fromisoformat(raw["transaction_date"]),
        )
