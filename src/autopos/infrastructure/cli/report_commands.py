"""CLI commands for the dashboard."""

from __future__ import annotations

import click

from autopos.application.dashboard import DashboardHandler
from autopos.infrastructure.cli.context import AppContext, pass_app


@click.command("dashboard")
@pass_app
def report_dashboard(app: AppContext) -> None:
    """Today's sales at a glance."""
    app.require("dashboard")
    dto = DashboardHandler(
        product_repo=app.products(),
        transaction_repo=app.transactions(),
        shift_repo=app.shifts(),
    ).handle()

    click.echo(f"Dashboard for {dto.day}")
    click.echo(f"  Revenue today:       {dto.revenue}")
    click.echo(f"  Transactions today:  {dto.transaction_count}")
    click.echo(f"  Low-stock products:  {dto.low_stock_count}")
    click.echo(f"  Open shifts:         {dto.open_shift_count}")

    if dto.recent:
        click.echo()
        click.echo("Recent transactions:")
        for t in dto.recent:
            click.echo(f"  #{t.id:<5} {t.created_at}  {t.total:>16}  {t.payment_method}")
