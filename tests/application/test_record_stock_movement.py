"""Tests for the Record Stock Movement use case and stock queries."""

import pytest

from autopos.application.record_stock_movement import RecordStockMovementHandler
from autopos.application.show_stock import MovementHistoryHandler, StockReportHandler
from autopos.domain.exceptions import EntityNotFoundError, ValidationError
from autopos.domain.model.product import Product
from autopos.domain.model.value_objects import Money
from tests.fakes import FakeMovementRepository, FakeProductRepository


def _setup():
    product_repo = FakeProductRepository(
        [
            Product(id="1", name="Spark Plug", price=Money(25000), stock=20, min_stock=5,
                    part_number="SP-10"),
            Product(id="2", name="Radiator Cap", price=Money(40000), stock=2, min_stock=3),
            Product(id="3", name="Clutch Cable", price=Money(60000), stock=0),
            Product(id="4", name="Retired Horn", price=Money(90000), stock=7,
                    is_active=False),
        ]
    )
    movement_repo = FakeMovementRepository()
    return product_repo, movement_repo


class TestRecordStockMovement:

    def test_in_sets_stock(self):
        product_repo, movement_repo = _setup()
        handler = RecordStockMovementHandler(product_repo, movement_repo)

        recorded = handler.handle("SP-10", "in", 50, notes="supplier delivery")

        assert recorded.previous_stock == 20
        assert recorded.new_stock == 50
        assert product_repo.get_by_id("1").stock == 50
        assert movement_repo.list_all()[0].notes == "supplier delivery"

    def test_out_clamps(self):
        product_repo, movement_repo = _setup()
        handler = RecordStockMovementHandler(product_repo, movement_repo)

        recorded = handler.handle("2", "OUT", 5)

        assert recorded.new_stock == 0
        assert recorded.movement.quantity == -5

    def test_unknown_kind(self):
        product_repo, movement_repo = _setup()
        handler = RecordStockMovementHandler(product_repo, movement_repo)
        with pytest.raises(ValidationError, match="Unknown movement type"):
            handler.handle("1", "transfer", 1)

    def test_inactive_product(self):
        product_repo, movement_repo = _setup()
        handler = RecordStockMovementHandler(product_repo, movement_repo)
        with pytest.raises(ValidationError, match="inactive"):
            handler.handle("4", "in", 1)

    def test_unknown_product(self):
        product_repo, movement_repo = _setup()
        handler = RecordStockMovementHandler(product_repo, movement_repo)
        with pytest.raises(EntityNotFoundError):
            handler.handle("nope", "in", 1)


class TestStockReport:

    def test_counts_and_value_cover_active_products_only(self):
        product_repo, _ = _setup()
        report = StockReportHandler(product_repo).handle()

        assert report.total_products == 3
        assert report.low_stock_count == 2  # radiator cap and clutch cable
        assert report.out_of_stock_count == 1
        assert report.stock_value == "Rp 580.000"

    def test_line_status(self):
        product_repo, _ = _setup()
        report = StockReportHandler(product_repo).handle()

        status = {line.product_name: line.status for line in report.lines}
        assert status == {"Spark Plug": "ok", "Radiator Cap": "low", "Clutch Cable": "out"}
        assert [line.product_name for line in report.low_stock_lines] == [
            "Clutch Cable",
            "Radiator Cap",
        ]


class TestMovementHistory:

    def test_newest_first_and_filtered(self):
        product_repo, movement_repo = _setup()
        handler = RecordStockMovementHandler(product_repo, movement_repo)
        handler.handle("1", "out", 2)
        handler.handle("2", "in", 10)
        handler.handle("1", "adjustment", 15)

        history = MovementHistoryHandler(movement_repo, product_repo).handle(product_id="1")

        assert [line.kind for line in history] == ["adjustment", "out"]
        assert history[0].product_name == "Spark Plug"
        assert history[1].quantity == -2
        assert history[1].reference == "manual"

    def test_limit(self):
        product_repo, movement_repo = _setup()
        handler = RecordStockMovementHandler(product_repo, movement_repo)
        for _ in range(4):
            handler.handle("1", "out", 1)

        history = MovementHistoryHandler(movement_repo, product_repo).handle(limit=2)
        assert len(history) == 2
