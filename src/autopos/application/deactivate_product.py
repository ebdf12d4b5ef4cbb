"""Application service: Deactivate Product use case (soft delete)."""

from __future__ import annotations

from autopos.domain.exceptions import EntityNotFoundError
from autopos.domain.repository.product_repository import ProductRepository


class DeactivateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        product.deactivate()
        self._product_repo.save(product)
