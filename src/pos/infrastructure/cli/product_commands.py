"""CLI commands for seeding and browsing the register's catalog."""

from __future__ import annotations

import click

from pos.application.add_product import AddProductHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import product_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Shelf price (e.g. 15.00).")
@click.option("--sku", default=None, help="Barcode / SKU the scanner reads.")
@click.option("--id", "product_id", default=None, help="Product ID (next number if omitted).")
def product_add(name: str, price: str, sku: str | None, product_id: str | None) -> None:
    """Add a product to the register's catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(name=name, price=price, sku=sku, product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added #{product.id} {product.name} at {product.price}")


@click.command("list")
def product_list() -> None:
    """Show the catalog with SKUs and shelf prices."""
    catalog = product_repository().list_all()
    if not catalog:
        click.echo("Catalog is empty.")
        return

    click.echo(f"{'ID':<6} {'SKU':<14} {'Name':<24} {'Price':>10}")
    for item in catalog:
        click.echo(f"{item.id:<6} {item.sku or '-':<14} {item.name:<24} {str(item.price):>10}")
