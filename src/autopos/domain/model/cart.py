"""Shopping cart held by the cashier until checkout."""

from __future__ import annotations

from dataclasses import dataclass, field

from autopos.domain.exceptions import ValidationError
from autopos.domain.model.checkout import LineItem
from autopos.domain.model.product import Product
from autopos.domain.model.value_objects import Money, Quantity


@dataclass
class CartLine:
    product: Product
    quantity: int

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity


@dataclass
class Cart:
    """Ordered product lines; quantities never exceed the product's stock."""

    lines: list[CartLine] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def add(self, product: Product, quantity: int = 1) -> None:
        if quantity <= 0:
            raise ValidationError("Quantity must be positive")
        if product.is_out_of_stock:
            raise ValidationError(f"'{product.name}' is out of stock")

        line = self._find(product.id)
        current = line.quantity if line else 0
        if current + quantity > product.stock:
            raise ValidationError(
                f"Insufficient stock for {product.name} "
                f"(want {current + quantity}, have {product.stock})"
            )

        if line:
            line.quantity += quantity
        else:
            self.lines.append(CartLine(product=product, quantity=quantity))

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """Set a line's quantity; 0 removes it, larger values clamp to stock."""
        line = self._find(product_id)
        if line is None:
            raise ValidationError(f"Product ID '{product_id}' is not in the cart")
        if quantity < 0:
            raise ValidationError("Quantity cannot be negative")
        if quantity == 0:
            self.remove(product_id)
            return
        line.quantity = min(quantity, line.product.stock)

    def remove(self, product_id: str) -> None:
        self.lines = [line for line in self.lines if line.product.id != product_id]

    def clear(self) -> None:
        self.lines = []

    def line_items(self) -> list[LineItem]:
        return [
            LineItem(unit_price=line.product.price, quantity=Quantity(line.quantity))
            for line in self.lines
        ]

    def _find(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product.id == product_id:
                return line
        return None
