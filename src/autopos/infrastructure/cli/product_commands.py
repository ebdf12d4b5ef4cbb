"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from autopos.application.add_product import AddProductHandler
from autopos.application.deactivate_product import DeactivateProductHandler
from autopos.application.search_products import SearchProductsHandler
from autopos.application.update_product import UpdateProductHandler
from autopos.domain.exceptions import DomainException
from autopos.infrastructure.cli.context import AppContext, pass_app


def _print_products(products) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(
        f"{'ID':<5} {'Name':<28} {'Part No.':<14} {'Price':>14} {'Stock':>6}"
    )
    click.echo("-" * 71)
    for p in products:
        flag = " (out)" if p.is_out_of_stock else " (low)" if p.is_low_stock else ""
        click.echo(
            f"{p.id:<5} {p.name[:28]:<28} {p.part_number[:14]:<14} "
            f"{str(p.price):>14} {p.stock:>6}{flag}"
        )


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price in rupiah (e.g. 50000).")
@click.option("--stock", default=0, show_default=True, type=int, help="Initial stock.")
@click.option("--min-stock", default=0, show_default=True, type=int, help="Low-stock threshold.")
@click.option("--part-number", default="", help="Manufacturer part number.")
@click.option("--barcode", default="", help="Barcode.")
@click.option("--category", default="", help="Category name.")
@click.option("--brand", default="", help="Brand name.")
@click.option("--description", default="", help="Free-text description.")
@pass_app
def product_add(
    app: AppContext,
    name: str,
    price: str,
    stock: int,
    min_stock: int,
    part_number: str,
    barcode: str,
    category: str,
    brand: str,
    description: str,
) -> None:
    """Add a new product to the catalog."""
    app.require("product-management")
    handler = AddProductHandler(product_repo=app.products())

    try:
        product = handler.handle(
            name=name,
            price=price,
            stock=stock,
            min_stock=min_stock,
            part_number=part_number,
            barcode=barcode,
            category=category,
            brand=brand,
            description=description,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("list")
@click.option("--category", default=None, help="Only this category.")
@pass_app
def product_list(app: AppContext, category: str | None) -> None:
    """List active products in the catalog."""
    app.require("products")
    _print_products(SearchProductsHandler(app.products()).handle(category=category))


@click.command("search")
@click.argument("query")
@click.option("--category", default=None, help="Only this category.")
@pass_app
def product_search(app: AppContext, query: str, category: str | None) -> None:
    """Search by name, part number or barcode."""
    app.require("products")
    _print_products(SearchProductsHandler(app.products()).handle(query, category))


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price.")
@click.option("--name", default=None, help="New name.")
@click.option("--min-stock", default=None, type=int, help="New low-stock threshold.")
@click.option("--category", default=None, help="New category.")
@click.option("--brand", default=None, help="New brand.")
@click.option("--barcode", default=None, help="New barcode.")
@pass_app
def product_update(
    app: AppContext,
    product_id: str,
    price: str | None,
    name: str | None,
    min_stock: int | None,
    category: str | None,
    brand: str | None,
    barcode: str | None,
) -> None:
    """Update a product's details."""
    app.require("product-management")
    handler = UpdateProductHandler(product_repo=app.products())

    try:
        product = handler.handle(
            product_id=product_id,
            price=price,
            name=name,
            min_stock=min_stock,
            category=category,
            brand=brand,
            barcode=barcode,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' updated ({product.price})")


@click.command("deactivate")
@click.option("--id", "product_id", required=True, help="Product ID.")
@pass_app
def product_deactivate(app: AppContext, product_id: str) -> None:
    """Remove a product from sale (kept for history)."""
    app.require("product-management")
    try:
        DeactivateProductHandler(app.products()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deactivated.")
