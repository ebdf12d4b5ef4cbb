import logging
from pathlib import Path

import click

from autopos.domain.exceptions import DomainException
from autopos.domain.model.session import Role, Session, visible_menu
from autopos.infrastructure import bootstrap
from autopos.infrastructure.cli.context import AppContext, pass_app
from autopos.infrastructure.cli.product_commands import (
    product_add,
    product_deactivate,
    product_list,
    product_search,
    product_update,
)
from autopos.infrastructure.cli.report_commands import report_dashboard
from autopos.infrastructure.cli.sale_commands import (
    sale_checkout,
    sale_list,
    sale_quote,
    sale_receipt,
    sale_show,
)
from autopos.infrastructure.cli.shift_commands import (
    shift_close,
    shift_current,
    shift_list,
    shift_open,
)
from autopos.infrastructure.cli.stock_commands import (
    stock_history,
    stock_move,
    stock_report,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=bootstrap.DATA_DIR_ENV,
    default=None,
    help="Directory holding the JSON data files.",
)
@click.option("--user", "user_id", envvar="AUTOPOS_USER", default="owner", show_default=True)
@click.option("--name", "full_name", envvar="AUTOPOS_NAME", default=None)
@click.option(
    "--role",
    envvar="AUTOPOS_ROLE",
    type=click.Choice([r.value for r in Role]),
    default=Role.STORE_OWNER.value,
    show_default=True,
)
@click.option(
    "--log-level",
    envvar="AUTOPOS_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
@click.pass_context
def cli(
    ctx: click.Context,
    data_dir: Path | None,
    user_id: str,
    full_name: str | None,
    role: str,
    log_level: str,
) -> None:
    """AutoPOS: point of sale for an auto-parts store"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        session = Session(user_id=user_id, full_name=full_name or user_id, role=Role(role))
    except DomainException as exc:
        raise click.ClickException(str(exc))
    ctx.obj = AppContext(data_dir=data_dir or bootstrap.data_dir(), session=session)


@cli.command("menu")
@pass_app
def menu(app: AppContext) -> None:
    """Show the sections available to the current role."""
    click.echo(f"{app.session.full_name} ({app.session.role.value})")
    for item in visible_menu(app.session.role):
        click.echo(f"  {item.id:<20} {item.label}")


@cli.group()
def product() -> None:
    """Browse and manage the catalog."""


@cli.group()
def stock() -> None:
    """Stock movements and reports."""


@cli.group()
def shift() -> None:
    """Open and close cash shifts."""


@cli.group()
def sale() -> None:
    """Cashier: quote, checkout, receipts."""


@cli.group()
def report() -> None:
    """Reports."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_deactivate)
product.add_command(product_list)
product.add_command(product_search)
product.add_command(product_update)
stock.add_command(stock_history)
stock.add_command(stock_move)
stock.add_command(stock_report)
shift.add_command(shift_close)
shift.add_command(shift_current)
shift.add_command(shift_list)
shift.add_command(shift_open)
sale.add_command(sale_checkout)
sale.add_command(sale_list)
sale.add_command(sale_quote)
sale.add_command(sale_receipt)
sale.add_command(sale_show)
report.add_command(report_dashboard)
