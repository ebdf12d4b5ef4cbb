"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from autopos.domain.exceptions import ValidationError
from autopos.domain.model.product import Product
from autopos.domain.model.value_objects import Money
from autopos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str | int,
        stock: int = 0,
        min_stock: int = 0,
        part_number: str = "",
        barcode: str = "",
        category: str = "",
        brand: str = "",
        description: str = "",
        weight: float = 0.0,
        dimensions: str = "",
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        if self._product_repo.get_by_name(name.strip()) is not None:
            raise ValidationError(f"Product '{name}' already exists")

        all_products = self._product_repo.list_all()
        part_number = part_number.strip()
        if part_number and any(
            p.part_number.lower() == part_number.lower() for p in all_products
        ):
            raise ValidationError(f"Part number '{part_number}' already exists")

        # Auto-assign ID based on existing products
        if all_products:
            next_id = str(max(int(p.id) for p in all_products) + 1)
        else:
            next_id = "1"

        product = Product(id=next_id, name=name.strip(), price=Money.zero())
        product.update_price(Money.of(price))
        product.set_stock(stock)
        product.set_min_stock(min_stock)
        product.part_number = part_number
        product.barcode = barcode.strip()
        product.category = category.strip()
        product.brand = brand.strip()
        product.description = description
        product.weight = weight
        product.dimensions = dimensions

        self._product_repo.save(product)
        logger.info("product #%s '%s' added at %s", product.id, product.name, product.price)
        return product
