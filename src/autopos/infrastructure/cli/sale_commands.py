"""CLI commands for the cashier: pricing, checkout and receipts."""

from __future__ import annotations

import click

from autopos.application.checkout import CheckoutHandler
from autopos.application.dto import CartLineSpec
from autopos.application.receipt import render_receipt
from autopos.application.show_transaction import (
    ListTransactionsHandler,
    ShowTransactionHandler,
)
from autopos.domain.exceptions import DomainException
from autopos.domain.model.checkout import PaymentMethod
from autopos.infrastructure import bootstrap
from autopos.infrastructure.cli.context import AppContext, pass_app

_PAYMENT_CHOICES = click.Choice([m.value for m in PaymentMethod])


def _parse_items(raw: str) -> list[CartLineSpec]:
    """Parse 'BRK-001:2,Oil Filter:1' into CartLineSpec list."""
    specs: list[CartLineSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            specs.append(CartLineSpec(product=pair, quantity=1))
            continue
        name, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )
        specs.append(CartLineSpec(product=name.strip(), quantity=qty))
    return specs


def _checkout_handler(app: AppContext) -> CheckoutHandler:
    return CheckoutHandler(
        product_repo=app.products(),
        transaction_repo=app.transactions(),
        shift_repo=app.shifts(),
        movement_repo=app.movements(),
    )


@click.command("quote")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@click.option("--payment", default="cash", show_default=True, type=_PAYMENT_CHOICES)
@click.option("--tendered", default=None, help="Amount handed over.")
@click.option("--discount", default=None, help="Discount amount.")
@pass_app
def sale_quote(
    app: AppContext,
    items: str,
    payment: str,
    tendered: str | None,
    discount: str | None,
) -> None:
    """Price a cart without recording a sale."""
    app.require("pos")
    try:
        quote = _checkout_handler(app).quote(
            _parse_items(items), payment, tendered=tendered, discount=discount
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Subtotal:       {quote.subtotal:>16}")
    click.echo(f"Tax (PPN 11%):  {quote.tax:>16}")
    click.echo(f"Discount:       {quote.discount:>16}")
    click.echo(f"Total:          {quote.total:>16}")
    click.echo(f"Tendered:       {quote.tendered:>16}")
    click.echo(f"Change:         {quote.change:>16}")


@click.command("checkout")
@click.option("--items", required=True, help="Items as 'Product:Qty,Product:Qty'.")
@click.option("--payment", default="cash", show_default=True, type=_PAYMENT_CHOICES)
@click.option("--tendered", default=None, help="Amount handed over (cash).")
@click.option("--discount", default=None, help="Discount amount.")
@click.option("--customer-phone", default=None, help="Customer phone (optional).")
@click.option("--notes", default=None)
@click.option("--print-receipt/--no-print-receipt", default=True, show_default=True)
@pass_app
def sale_checkout(
    app: AppContext,
    items: str,
    payment: str,
    tendered: str | None,
    discount: str | None,
    customer_phone: str | None,
    notes: str | None,
    print_receipt: bool,
) -> None:
    """Record a sale and deduct stock."""
    app.require("pos")
    try:
        dto = _checkout_handler(app).handle(
            app.session,
            _parse_items(items),
            payment,
            tendered=tendered,
            discount=discount,
            customer_phone=customer_phone,
            notes=notes,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Transaction #{dto.id} recorded: {dto.total} ({dto.payment_method})")
    if dto.has_change:
        click.echo(f"Change due: {dto.change}")
    if print_receipt:
        click.echo()
        click.echo(render_receipt(dto, bootstrap.store_info()), nl=False)


@click.command("show")
@click.option("--id", "transaction_id", required=True, type=int)
@pass_app
def sale_show(app: AppContext, transaction_id: int) -> None:
    """Show a recorded transaction."""
    app.require("pos")
    try:
        dto = ShowTransactionHandler(app.transactions()).handle(transaction_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Transaction #{dto.id}  ({dto.created_at}, staff {dto.staff_id})")
    click.echo()
    click.echo(f"  {'Product':<28} {'Qty':>4} {'Price':>14} {'Subtotal':>14}")
    click.echo(f"  {'-'*63}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name[:28]:<28} {item.quantity:>4} "
            f"{item.unit_price:>14} {item.subtotal:>14}"
        )
    click.echo(f"  {'-'*63}")
    click.echo(f"  {'Total':<28} {dto.total:>34}")
    click.echo(f"  {'Paid (' + dto.payment_method + ')':<28} {dto.tendered:>34}")


@click.command("list")
@click.option("--limit", default=20, show_default=True, type=int)
@click.option("--shift-id", default=None, type=int, help="Only this shift.")
@pass_app
def sale_list(app: AppContext, limit: int, shift_id: int | None) -> None:
    """List recent transactions."""
    app.require("pos")
    rows = ListTransactionsHandler(app.transactions()).handle(limit=limit, shift_id=shift_id)
    if not rows:
        click.echo("No transactions found.")
        return

    click.echo(f"{'ID':<6} {'Date':<17} {'Items':>5} {'Total':>16}  Payment")
    click.echo("-" * 55)
    for t in rows:
        click.echo(
            f"{t.id:<6} {t.created_at:<17} {len(t.items):>5} {t.total:>16}  {t.payment_method}"
        )


@click.command("receipt")
@click.option("--id", "transaction_id", required=True, type=int)
@pass_app
def sale_receipt(app: AppContext, transaction_id: int) -> None:
    """Reprint a receipt."""
    app.require("pos")
    try:
        dto = ShowTransactionHandler(app.transactions()).handle(transaction_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(render_receipt(dto, bootstrap.store_info()), nl=False)
