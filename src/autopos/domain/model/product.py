"""Product aggregate.

Products live independently of sales. Prices change and stock moves,
but transactions keep the price captured at checkout.
"""

from __future__ import annotations

from dataclasses import dataclass

from autopos.domain.exceptions import ValidationError
from autopos.domain.model.value_objects import Money


@dataclass
class Product:
    """A spare part in the catalog.

    Deleting a product only deactivates it, so past transactions and
    ledger records keep pointing at a real row.
    """

    id: str
    name: str
    price: Money
    stock: int = 0
    min_stock: int = 0
    description: str = ""
    category: str = ""
    brand: str = ""
    part_number: str = ""
    barcode: str = ""
    weight: float = 0.0
    dimensions: str = ""
    is_active: bool = True

    @property
    def is_out_of_stock(self) -> bool:
        return self.stock == 0

    @property
    def is_low_stock(self) -> bool:
        return self.stock <= self.min_stock

    @property
    def stock_value(self) -> Money:
        return self.price * self.stock

    def matches(self, query: str) -> bool:
        """Case-insensitive match on name and part number, verbatim on barcode."""
        needle = query.strip().lower()
        if not needle:
            return True
        return (
            needle in self.name.lower()
            or needle in self.part_number.lower()
            or query.strip() in self.barcode
        )

    def update_price(self, new_price: Money) -> None:
        if new_price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

    def set_stock(self, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError("Stock cannot be negative")
        self.stock = quantity

    def set_min_stock(self, quantity: int) -> None:
        if quantity < 0:
            raise ValidationError("Minimum stock cannot be negative")
        self.min_stock = quantity

    def deactivate(self) -> None:
        if not self.is_active:
            raise ValidationError(f"Product '{self.name}' is already inactive")
        self.is_active = False
