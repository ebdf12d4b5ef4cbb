"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from autopos.domain.model.product import Product
from autopos.domain.model.shift import Shift
from autopos.domain.model.stock import InventoryMovement
from autopos.domain.model.transaction import Transaction
from autopos.domain.repository.movement_repository import MovementRepository
from autopos.domain.repository.product_repository import ProductRepository
from autopos.domain.repository.shift_repository import ShiftRepository
from autopos.domain.repository.transaction_repository import TransactionRepository


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for p in self._store.values():
            if p.name.lower() == name.lower():
                return p
        return None

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product


class FakeTransactionRepository(TransactionRepository):

    def __init__(self) -> None:
        self._store: dict[int, Transaction] = {}
        self._next_id = 1

    def get_by_id(self, transaction_id: int) -> Transaction | None:
        return self._store.get(transaction_id)

    def list_all(self) -> list[Transaction]:
        return list(self._store.values())

    def save(self, transaction: Transaction) -> None:
        if transaction.id is None:
            transaction.id = self._next_id
            self._next_id += 1
        self._store[transaction.id] = transaction

    def remove(self, transaction_id: int) -> None:
        self._store.pop(transaction_id, None)


class FakeShiftRepository(ShiftRepository):

    def __init__(self, shifts: list[Shift] | None = None) -> None:
        self._store: dict[int, Shift] = {}
        self._next_id = 1
        for s in shifts or []:
            self.save(s)

    def get_by_id(self, shift_id: int) -> Shift | None:
        return self._store.get(shift_id)

    def list_all(self) -> list[Shift]:
        return list(self._store.values())

    def save(self, shift: Shift) -> None:
        if shift.id is None:
            shift.id = self._next_id
            self._next_id += 1
        self._store[shift.id] = shift


class FakeMovementRepository(MovementRepository):

    def __init__(self) -> None:
        self._store: dict[int, InventoryMovement] = {}
        self._next_id = 1

    def add(self, movement: InventoryMovement) -> None:
        movement.id = self._next_id
        self._next_id += 1
        self._store[movement.id] = movement

    def list_all(self) -> list[InventoryMovement]:
        return list(self._store.values())

    def remove(self, movement_id: int) -> None:
        self._store.pop(movement_id, None)


class FailingMovementRepository(FakeMovementRepository):
    """Accepts ``fail_after`` appends, then raises on every add.

    The first ``failing_removes`` calls to ``remove`` raise as well.
    """

    def __init__(self, fail_after: int = 0, failing_removes: int = 0) -> None:
        super().__init__()
        self._remaining = fail_after
        self._failing_removes = failing_removes

    def add(self, movement: InventoryMovement) -> None:
        if self._remaining <= 0:
            raise OSError("ledger storage unavailable")
        self._remaining -= 1
        super().add(movement)

    def remove(self, movement_id: int) -> None:
        if self._failing_removes > 0:
            self._failing_removes -= 1
            raise RuntimeError("ledger row is locked")
        super().remove(movement_id)
