"""CLI commands for cash shifts."""

from __future__ import annotations

import click

from autopos.application.close_shift import CloseShiftHandler
from autopos.application.open_shift import OpenShiftHandler
from autopos.application.show_shifts import CurrentShiftHandler, ListShiftsHandler
from autopos.domain.exceptions import DomainException
from autopos.infrastructure.cli.context import AppContext, pass_app


@click.command("open")
@click.option("--opening-cash", required=True, help="Counted float in the drawer.")
@pass_app
def shift_open(app: AppContext, opening_cash: str) -> None:
    """Open a shift for the current user."""
    app.require("shift")
    try:
        dto = OpenShiftHandler(app.shifts()).handle(app.session, opening_cash)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Shift #{dto.id} opened at {dto.start_time} with {dto.opening_cash}")


@click.command("close")
@click.option("--closing-cash", required=True, help="Counted cash in the drawer.")
@pass_app
def shift_close(app: AppContext, closing_cash: str) -> None:
    """Close the current user's shift."""
    app.require("shift")
    handler = CloseShiftHandler(
        shift_repo=app.shifts(),
        transaction_repo=app.transactions(),
    )
    try:
        dto = handler.handle(app.session, closing_cash)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Shift #{dto.id} closed at {dto.end_time}")
    click.echo(f"  Transactions:  {dto.total_transactions}")
    click.echo(f"  Total sales:   {dto.total_sales}")
    click.echo(f"  Expected cash: {dto.expected_cash}")
    click.echo(f"  Counted cash:  {dto.closing_cash}")
    click.echo(f"  Variance:      {dto.variance}")


@click.command("current")
@pass_app
def shift_current(app: AppContext) -> None:
    """Show the current user's open shift."""
    app.require("shift")
    dto = CurrentShiftHandler(app.shifts()).handle(app.session)
    if dto is None:
        click.echo("No active shift.")
        return
    click.echo(f"Shift #{dto.id} open since {dto.start_time} ({dto.duration_hours} h)")
    click.echo(f"  Opening cash: {dto.opening_cash}")


@click.command("list")
@click.option("--limit", default=10, show_default=True, type=int)
@pass_app
def shift_list(app: AppContext, limit: int) -> None:
    """Show the current user's recent shifts."""
    app.require("shift")
    shifts = ListShiftsHandler(app.shifts()).handle(app.session, limit=limit)
    if not shifts:
        click.echo("No shifts found.")
        return

    click.echo(
        f"{'ID':<5} {'Start':<17} {'Hours':>5} {'Opening':>14} {'Closing':>14} "
        f"{'Sales':>14} {'Txns':>5}  Status"
    )
    click.echo("-" * 91)
    for s in shifts:
        click.echo(
            f"{s.id:<5} {s.start_time:<17} {s.duration_hours:>5} {s.opening_cash:>14} "
            f"{s.closing_cash or '-':>14} {s.total_sales or '-':>14} "
            f"{s.total_transactions:>5}  {s.status}"
        )
