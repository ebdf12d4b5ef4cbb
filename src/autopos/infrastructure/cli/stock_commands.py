"""CLI commands for stock maintenance."""

from __future__ import annotations

import click

from autopos.application.record_stock_movement import RecordStockMovementHandler
from autopos.application.show_stock import MovementHistoryHandler, StockReportHandler
from autopos.domain.exceptions import DomainException
from autopos.domain.model.stock import MovementKind
from autopos.infrastructure.cli.context import AppContext, pass_app


@click.command("move")
@click.option("--product", required=True, help="Product ID, part number, barcode or name.")
@click.option(
    "--type",
    "kind",
    required=True,
    type=click.Choice([k.value for k in MovementKind]),
    help="in / adjustment set the stock level; out removes units.",
)
@click.option("--quantity", required=True, type=int, help="Units.")
@click.option("--notes", default=None, help="Reason for the movement.")
@pass_app
def stock_move(
    app: AppContext, product: str, kind: str, quantity: int, notes: str | None
) -> None:
    """Record a stock movement."""
    app.require("stock")
    handler = RecordStockMovementHandler(
        product_repo=app.products(),
        movement_repo=app.movements(),
    )

    try:
        recorded = handler.handle(product, kind, quantity, notes=notes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Stock for product #{recorded.product_id}: "
        f"{recorded.previous_stock} -> {recorded.new_stock} "
        f"(ledger {recorded.movement.quantity:+d})"
    )


@click.command("report")
@click.option("--low-only", is_flag=True, default=False, help="Only low or empty stock.")
@pass_app
def stock_report(app: AppContext, low_only: bool) -> None:
    """Show stock levels and totals."""
    app.require("stock")
    report = StockReportHandler(app.products()).handle()

    click.echo(f"Products:      {report.total_products}")
    click.echo(f"Low stock:     {report.low_stock_count}")
    click.echo(f"Out of stock:  {report.out_of_stock_count}")
    click.echo(f"Stock value:   {report.stock_value}")
    click.echo()

    lines = report.low_stock_lines if low_only else report.lines
    if not lines:
        click.echo("No stock records found.")
        return

    click.echo(f"{'ID':<5} {'Product':<28} {'Stock':>7} {'Min':>5}  Status")
    click.echo("-" * 56)
    for line in lines:
        click.echo(
            f"{line.product_id:<5} {line.product_name[:28]:<28} "
            f"{line.stock:>7} {line.min_stock:>5}  {line.status}"
        )


@click.command("history")
@click.option("--product-id", default=None, help="Only this product.")
@click.option("--limit", default=20, show_default=True, type=int)
@pass_app
def stock_history(app: AppContext, product_id: str | None, limit: int) -> None:
    """Show the inventory movement ledger, newest first."""
    app.require("stock")
    lines = MovementHistoryHandler(app.movements(), app.products()).handle(
        product_id=product_id, limit=limit
    )

    if not lines:
        click.echo("No stock movements recorded.")
        return

    click.echo(f"{'Date':<17} {'Product':<24} {'Type':<11} {'Qty':>6}  Reference")
    click.echo("-" * 72)
    for line in lines:
        click.echo(
            f"{line.created_at:<17} {line.product_name[:24]:<24} {line.kind:<11} "
            f"{line.quantity:>+6}  {line.reference}"
        )
