"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from pathlib import Path

from autopos.domain.model.product import Product
from autopos.domain.model.value_objects import DEFAULT_CURRENCY, Money
from autopos.domain.repository.product_repository import ProductRepository
from autopos.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        products = self._load()
        products[product.id] = product
        self._file.persist([self._to_raw(p) for p in products.values()])

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {raw["id"]: self._to_domain(raw) for raw in self._file.load()}

    @staticmethod
    def _to_raw(p: Product) -> dict:
        return {
            "id": p.id,
            "name": p.name,
            "description": p.description,
            "price": p.price.amount,
            "currency": p.price.currency,
            "stock": p.stock,
            "min_stock": p.min_stock,
            "category": p.category,
            "brand": p.brand,
            "part_number": p.part_number,
            "barcode": p.barcode,
            "weight": p.weight,
            "dimensions": p.dimensions,
            "is_active": p.is_active,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            price=Money(raw["price"], raw.get("currency", DEFAULT_CURRENCY)),
            stock=raw.get("stock", 0),
            min_stock=raw.get("min_stock", 0),
            description=raw.get("description", ""),
            category=raw.get("category", ""),
            brand=raw.get("brand", ""),
            part_number=raw.get("part_number", ""),
            barcode=raw.get("barcode", ""),
            weight=raw.get("weight", 0.0),
            dimensions=raw.get("dimensions", ""),
            is_active=raw.get("is_active", True),
        )
