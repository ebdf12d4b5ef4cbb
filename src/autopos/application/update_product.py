"""Application service: Update Product use case."""

from __future__ import annotations

from autopos.domain.exceptions import EntityNotFoundError, ValidationError
from autopos.domain.model.product import Product
from autopos.domain.model.value_objects import Money
from autopos.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        price: str | int | None = None,
        name: str | None = None,
        min_stock: int | None = None,
        category: str | None = None,
        brand: str | None = None,
        description: str | None = None,
        barcode: str | None = None,
    ) -> Product:
        """Edit a product's details.

        Stock is not editable here; it only moves through the stock
        ledger. Past transactions keep their captured prices.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if name is not None:
            if not name.strip():
                raise ValidationError("Product name is required")
            other = self._product_repo.get_by_name(name.strip())
            if other is not None and other.id != product.id:
                raise ValidationError(f"Product '{name}' already exists")
            product.name = name.strip()
        if price is not None:
            product.update_price(Money.of(price))
        if min_stock is not None:
            product.set_min_stock(min_stock)
        if category is not None:
            product.category = category.strip()
        if brand is not None:
            product.brand = brand.strip()
        if description is not None:
            product.description = description
        if barcode is not None:
            product.barcode = barcode.strip()

        self._product_repo.save(product)
        return product
