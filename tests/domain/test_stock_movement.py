"""Unit tests for stock movement arithmetic."""

import pytest

from autopos.domain.exceptions import ValidationError
from autopos.domain.model.stock import MovementKind, StockChange, apply_stock_movement


class TestOutMovement:

    def test_out_decrements(self):
        change = apply_stock_movement(10, MovementKind.OUT, 3)
        assert change == StockChange(previous_stock=10, new_stock=7, ledger_delta=-3)

    def test_out_beyond_stock_clamps_at_zero(self):
        change = apply_stock_movement(5, MovementKind.OUT, 8)
        assert change.new_stock == 0
        assert change.ledger_delta == -8

    def test_out_of_everything(self):
        assert apply_stock_movement(4, MovementKind.OUT, 4).new_stock == 0


class TestSetMovements:

    def test_in_sets_stock_directly(self):
        change = apply_stock_movement(5, MovementKind.IN, 12)
        assert change.new_stock == 12
        assert change.ledger_delta == 12

    def test_adjustment_sets_stock_directly(self):
        change = apply_stock_movement(40, MovementKind.ADJUSTMENT, 3)
        assert change.new_stock == 3
        assert change.ledger_delta == 3

    @pytest.mark.parametrize("current", [0, 7, 100])
    def test_in_and_adjustment_have_identical_effect(self, current):
        a = apply_stock_movement(current, MovementKind.IN, 9)
        b = apply_stock_movement(current, MovementKind.ADJUSTMENT, 9)
        assert a == b


class TestValidation:

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            apply_stock_movement(5, MovementKind.OUT, -1)

    def test_negative_current_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            apply_stock_movement(-2, MovementKind.IN, 1)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            apply_stock_movement(5, MovementKind.IN, 2.5)
