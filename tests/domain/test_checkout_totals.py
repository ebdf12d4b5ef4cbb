"""Unit tests for the order totals calculation."""

import pytest

from autopos.domain.exceptions import InsufficientPayment, ValidationError
from autopos.domain.model.checkout import (
    LineItem,
    OrderTotals,
    PaymentMethod,
    compute_order_totals,
)
from autopos.domain.model.value_objects import Money, Quantity


def _items(*pairs):
    return [LineItem(unit_price=Money(price), quantity=Quantity(qty)) for price, qty in pairs]


BRAKES_AND_FILTER = _items((50000, 2), (125000, 1))


class TestTotals:

    def test_worked_example(self):
        totals = compute_order_totals(
            BRAKES_AND_FILTER, PaymentMethod.CASH, tendered=Money(300000)
        )
        assert totals.subtotal == Money(225000)
        assert totals.tax == Money(24750)
        assert totals.discount == Money(0)
        assert totals.total == Money(249750)
        assert totals.change == Money(50250)

    def test_total_is_subtotal_plus_tax_minus_discount(self):
        totals = compute_order_totals(
            _items((19999, 3), (7, 1)), PaymentMethod.CARD, discount=Money(500)
        )
        assert totals.total.amount == (
            totals.subtotal.amount + totals.tax.amount - totals.discount.amount
        )

    def test_tax_is_rounded_half_up(self):
        totals = compute_order_totals(_items((50, 1)), PaymentMethod.CARD)
        assert totals.tax == Money(6)

    def test_tax_is_computed_before_discount(self):
        totals = compute_order_totals(
            BRAKES_AND_FILTER, PaymentMethod.CARD, discount=Money(25000)
        )
        assert totals.tax == Money(24750)
        assert totals.total == Money(224750)

    def test_discount_larger_than_order_rejected(self):
        with pytest.raises(ValidationError, match="exceeds"):
            compute_order_totals(_items((1000, 1)), PaymentMethod.CARD, discount=Money(5000))

    def test_empty_order_is_all_zero(self):
        totals = compute_order_totals([], PaymentMethod.CASH)
        assert totals == OrderTotals(
            subtotal=Money(0),
            tax=Money(0),
            discount=Money(0),
            total=Money(0),
            tendered=Money(0),
            change=Money(0),
        )

    def test_deterministic(self):
        a = compute_order_totals(BRAKES_AND_FILTER, PaymentMethod.CASH, Money(300000))
        b = compute_order_totals(BRAKES_AND_FILTER, PaymentMethod.CASH, Money(300000))
        assert a == b


class TestCashPayment:

    def test_short_payment_raises(self):
        with pytest.raises(InsufficientPayment) as exc_info:
            compute_order_totals(BRAKES_AND_FILTER, PaymentMethod.CASH, Money(200000))
        assert exc_info.value.total == Money(249750)
        assert exc_info.value.tendered == Money(200000)
        assert exc_info.value.shortfall == 49750

    def test_exact_payment_gives_no_change(self):
        totals = compute_order_totals(BRAKES_AND_FILTER, PaymentMethod.CASH, Money(249750))
        assert totals.change == Money(0)

    def test_omitted_tender_defaults_to_total(self):
        totals = compute_order_totals(BRAKES_AND_FILTER, PaymentMethod.CASH)
        assert totals.tendered == totals.total
        assert totals.change == Money(0)


class TestNonCashPayment:

    @pytest.mark.parametrize(
        "method", [PaymentMethod.CARD, PaymentMethod.TRANSFER, PaymentMethod.QRIS]
    )
    def test_change_always_zero(self, method):
        over = compute_order_totals(BRAKES_AND_FILTER, method, Money(1000000))
        under = compute_order_totals(BRAKES_AND_FILTER, method, Money(1))
        assert over.change == Money(0)
        assert under.change == Money(0)

    def test_tendered_is_informational(self):
        totals = compute_order_totals(BRAKES_AND_FILTER, PaymentMethod.QRIS, Money(1))
        assert totals.tendered == Money(1)
        assert totals.total == Money(249750)
