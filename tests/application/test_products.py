"""Tests for the catalog use cases."""

import pytest

from autopos.application.add_product import AddProductHandler
from autopos.application.deactivate_product import DeactivateProductHandler
from autopos.application.search_products import SearchProductsHandler, resolve_product
from autopos.application.update_product import UpdateProductHandler
from autopos.domain.exceptions import EntityNotFoundError, ValidationError
from autopos.domain.model.value_objects import Money
from tests.fakes import FakeProductRepository


def _seeded():
    repo = FakeProductRepository()
    add = AddProductHandler(repo)
    add.handle("Brake Pad Set", "50000", stock=10, part_number="BP-001",
               category="Brakes", brand="Nissin")
    add.handle("Air Filter", 125000, stock=4, barcode="8990001112223",
               category="Filters")
    add.handle("Brake Fluid DOT 4", 65000, stock=12, part_number="BF-4",
               category="Brakes")
    return repo


class TestAddProduct:

    def test_ids_are_assigned_in_sequence(self):
        repo = _seeded()
        assert sorted(p.id for p in repo.list_all()) == ["1", "2", "3"]

    def test_fields_are_stored(self):
        repo = _seeded()
        pad = repo.get_by_id("1")
        assert pad.price == Money(50000)
        assert pad.stock == 10
        assert pad.brand == "Nissin"
        assert pad.is_active

    def test_duplicate_name_rejected(self):
        repo = _seeded()
        with pytest.raises(ValidationError, match="already exists"):
            AddProductHandler(repo).handle("air filter", 1000)

    def test_duplicate_part_number_rejected(self):
        repo = _seeded()
        with pytest.raises(ValidationError, match="Part number 'bp-001' already exists"):
            AddProductHandler(repo).handle("Brake Pad Rear", 1000, part_number="bp-001")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            AddProductHandler(FakeProductRepository()).handle(" ", 1000)

    def test_zero_price_rejected(self):
        with pytest.raises(ValidationError, match="greater than zero"):
            AddProductHandler(FakeProductRepository()).handle("Bolt", 0)


class TestUpdateProduct:

    def test_partial_update(self):
        repo = _seeded()
        product = UpdateProductHandler(repo).handle("2", price="130.000", min_stock=2)
        assert product.price == Money(130000)
        assert product.min_stock == 2
        assert product.name == "Air Filter"

    def test_rename_to_existing_name_rejected(self):
        repo = _seeded()
        with pytest.raises(ValidationError, match="already exists"):
            UpdateProductHandler(repo).handle("2", name="Brake Pad Set")

    def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError, match="not found"):
            UpdateProductHandler(FakeProductRepository()).handle("9", price=1)


class TestSearch:

    def test_query_matches_name_and_part_number(self):
        repo = _seeded()
        names = [p.name for p in SearchProductsHandler(repo).handle("brake")]
        assert names == ["Brake Fluid DOT 4", "Brake Pad Set"]

    def test_category_filter(self):
        repo = _seeded()
        names = [p.name for p in SearchProductsHandler(repo).handle(category="filters")]
        assert names == ["Air Filter"]

    def test_deactivated_products_are_hidden(self):
        repo = _seeded()
        DeactivateProductHandler(repo).handle("1")
        names = [p.name for p in SearchProductsHandler(repo).handle("brake")]
        assert names == ["Brake Fluid DOT 4"]
        assert repo.get_by_id("1") is not None


class TestResolveProduct:

    def test_by_id(self):
        assert resolve_product(_seeded(), "3").name == "Brake Fluid DOT 4"

    def test_by_part_number(self):
        assert resolve_product(_seeded(), "bf-4").id == "3"

    def test_by_barcode(self):
        assert resolve_product(_seeded(), "8990001112223").id == "2"

    def test_by_name(self):
        assert resolve_product(_seeded(), "brake pad set").id == "1"

    def test_not_found(self):
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            resolve_product(_seeded(), "XYZ")


def test_deactivate_unknown_product():
    with pytest.raises(EntityNotFoundError):
        DeactivateProductHandler(FakeProductRepository()).handle("7")
