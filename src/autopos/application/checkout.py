"""Application service: Checkout use case.

Turns the cashier's cart into a recorded sale. The flow has two phases:

  Phase 1, validate: open shift, products, stock and payment are all
            checked and totals are computed. Nothing is written.
  Phase 2, write: the transaction is saved, then one ``out`` movement
            per line goes through the stock ledger. If any write fails,
            the completed ones are undone in reverse order and the
            original error is re-raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from autopos.application.dto import CartLineSpec, TransactionDTO, transaction_to_dto
from autopos.application.search_products import resolve_product
from autopos.domain.exceptions import NoActiveShift, ValidationError
from autopos.domain.model.cart import Cart
from autopos.domain.model.checkout import (
    OrderTotals,
    PaymentMethod,
    compute_order_totals,
)
from autopos.domain.model.session import Session
from autopos.domain.model.stock import REFERENCE_SALE, MovementKind
from autopos.domain.model.transaction import Transaction, TransactionItem
from autopos.domain.model.value_objects import Money, Quantity
from autopos.domain.repository.movement_repository import MovementRepository
from autopos.domain.repository.product_repository import ProductRepository
from autopos.domain.repository.shift_repository import ShiftRepository
from autopos.domain.repository.transaction_repository import TransactionRepository
from autopos.domain.service.stock_ledger_service import (
    RecordedMovement,
    StockLedgerService,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuoteDTO:
    subtotal: str
    tax: str
    discount: str
    total: str
    tendered: str
    change: str


def parse_payment_method(raw: str | PaymentMethod) -> PaymentMethod:
    if isinstance(raw, PaymentMethod):
        return raw
    try:
        return PaymentMethod(raw.strip().lower())
    except ValueError as exc:
        choices = ", ".join(m.value for m in PaymentMethod)
        raise ValidationError(
            f"Unknown payment method '{raw}' (expected one of: {choices})"
        ) from exc


class CheckoutHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        transaction_repo: TransactionRepository,
        shift_repo: ShiftRepository,
        movement_repo: MovementRepository,
    ) -> None:
        self._product_repo = product_repo
        self._transaction_repo = transaction_repo
        self._shift_repo = shift_repo
        self._ledger = StockLedgerService(product_repo, movement_repo)

    def quote(
        self,
        item_specs: list[CartLineSpec],
        payment_method: str | PaymentMethod = PaymentMethod.CASH,
        tendered: str | int | None = None,
        discount: str | int | None = None,
    ) -> QuoteDTO:
        """Price a cart without recording anything."""
        cart = self._build_cart(item_specs, allow_empty=True)
        totals = self._compute(cart, payment_method, tendered, discount)
        return QuoteDTO(
            subtotal=str(totals.subtotal),
            tax=str(totals.tax),
            discount=str(totals.discount),
            total=str(totals.total),
            tendered=str(totals.tendered),
            change=str(totals.change),
        )

    def handle(
        self,
        session: Session,
        item_specs: list[CartLineSpec],
        payment_method: str | PaymentMethod,
        tendered: str | int | None = None,
        discount: str | int | None = None,
        customer_phone: str | None = None,
        notes: str | None = None,
    ) -> TransactionDTO:
        # Phase 1: validate
        shift = self._shift_repo.get_open_for_staff(session.user_id)
        if shift is None:
            raise NoActiveShift("Open a shift before starting a sale")

        method = parse_payment_method(payment_method)
        cart = self._build_cart(item_specs, allow_empty=False)
        totals = self._compute(cart, method, tendered, discount)

        transaction = Transaction(
            id=None,
            staff_id=session.user_id,
            cashier_name=session.full_name,
            shift_id=shift.id,
            items=[
                TransactionItem(
                    product_id=line.product.id,
                    product_name=line.product.name,
                    part_number=line.product.part_number,
                    quantity=Quantity(line.quantity),
                    unit_price=line.product.price,  # <-- price snapshot
                )
                for line in cart.lines
            ],
            totals=totals,
            payment_method=method,
            customer_phone=(customer_phone or "").strip() or None,
            notes=notes or None,
        )

        # Phase 2: write, undoing completed steps on failure
        self._transaction_repo.save(transaction)
        completed: list[RecordedMovement] = []
        try:
            for line in cart.lines:
                completed.append(
                    self._ledger.record(
                        line.product,
                        MovementKind.OUT,
                        line.quantity,
                        reference_type=REFERENCE_SALE,
                        reference_id=str(transaction.id),
                    )
                )
        except Exception:
            logger.warning(
                "checkout #%s failed after %d of %d stock updates; rolling back",
                transaction.id,
                len(completed),
                len(cart.lines),
            )
            self._roll_back(transaction, completed)
            raise

        logger.info(
            "sale #%s by %s: %s via %s",
            transaction.id,
            session.user_id,
            totals.total,
            method.value,
        )
        return transaction_to_dto(transaction)

    # --- Internal helpers -----------------------------------------------------

    def _roll_back(
        self, transaction: Transaction, completed: list[RecordedMovement]
    ) -> None:
        """Undo every completed write; a failing step is logged and skipped."""
        for recorded in reversed(completed):
            try:
                self._ledger.revert(recorded)
            except Exception:
                logger.exception(
                    "could not revert stock movement on product %s for sale #%s",
                    recorded.product_id,
                    transaction.id,
                )
        try:
            self._transaction_repo.remove(transaction.id)  # type: ignore[arg-type]
        except Exception:
            logger.exception("could not remove transaction #%s", transaction.id)

    def _build_cart(self, item_specs: list[CartLineSpec], allow_empty: bool) -> Cart:
        if not item_specs and not allow_empty:
            raise ValidationError("Cart is empty")

        cart = Cart()
        for spec in item_specs:
            product = resolve_product(self._product_repo, spec.product)
            if not product.is_active:
                raise ValidationError(f"Product '{product.name}' is no longer sold")
            cart.add(product, spec.quantity)
        return cart

    @staticmethod
    def _compute(
        cart: Cart,
        payment_method: str | PaymentMethod,
        tendered: str | int | None,
        discount: str | int | None,
    ) -> OrderTotals:
        return compute_order_totals(
            cart.line_items(),
            parse_payment_method(payment_method),
            tendered=Money.of(tendered) if tendered not in (None, "") else None,
            discount=Money.of(discount) if discount not in (None, "") else None,
        )
