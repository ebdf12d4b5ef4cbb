"""Application service: catalog queries."""

from __future__ import annotations

from autopos.domain.exceptions import EntityNotFoundError
from autopos.domain.model.product import Product
from autopos.domain.repository.product_repository import ProductRepository


class SearchProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, query: str = "", category: str | None = None) -> list[Product]:
        """Active products matching the query, sorted by name."""
        results = [
            p
            for p in self._product_repo.list_all()
            if p.is_active
            and p.matches(query)
            and (not category or p.category.lower() == category.lower())
        ]
        return sorted(results, key=lambda p: p.name.lower())


def resolve_product(product_repo: ProductRepository, key: str) -> Product:
    """Find a product by ID, then part number, barcode, then name."""
    key = key.strip()
    product = product_repo.get_by_id(key)
    if product is not None:
        return product

    for candidate in product_repo.list_all():
        if candidate.part_number and candidate.part_number.lower() == key.lower():
            return candidate
        if candidate.barcode and candidate.barcode == key:
            return candidate

    product = product_repo.get_by_name(key)
    if product is None:
        raise EntityNotFoundError(f"Product not found: '{key}'")
    return product
