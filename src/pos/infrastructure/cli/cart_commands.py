"""CLI commands for the register's open cart."""

from __future__ import annotations

import click

from pos.application.add_to_cart import AddToCartHandler
from pos.application.apply_promotions import ApplyPromotionsHandler
from pos.application.clear_cart import ClearCartHandler
from pos.application.discard_held_cart import DiscardHeldCartHandler
from pos.application.dto import CartDTO
from pos.application.hold_cart import HoldCartHandler
from pos.application.list_held_carts import ListHeldCartsHandler
from pos.application.remove_from_cart import RemoveFromCartHandler
from pos.application.resume_held_cart import ResumeHeldCartHandler
from pos.application.set_line_discount import SetLineDiscountHandler
from pos.application.show_cart import ShowCartHandler
from pos.application.update_cart_quantity import UpdateCartQuantityHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import (
    cart_repository,
    held_cart_repository,
    product_repository,
    promotion_repository,
    settings,
    settings_provider,
)


def _display_cart(dto: CartDTO, with_totals: bool = True) -> None:
    """Shared formatting for displaying a cart."""
    if not dto.items:
        click.echo("Cart is empty.")
        return

    if dto.customer_id:
        click.echo(f"Customer: {dto.customer_id}")
    click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Disc':>8} {'Total':>10}")
    click.echo(f"  {'-'*64}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<6} {item.product_name:<20} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_discount:>8} {item.line_subtotal:>10}"
        )
    click.echo(f"  {'-'*64}")
    click.echo(f"  {'Subtotal':<40} {dto.subtotal:>23}")
    if not with_totals:
        return
    click.echo(f"  {'Discount (' + dto.cart_discount + ')':<40} {'-' + dto.discount_amount:>23}")
    click.echo(f"  {'Tax (' + dto.tax_rate + ')':<40} {dto.tax_amount:>23}")
    click.echo(f"  {'Total':<40} {dto.total:>23}")


@click.command("add")
@click.option("--product", "code", required=True, help="Product ID or SKU.")
@click.option("--qty", "quantity", default=1, show_default=True, type=int, help="Quantity to add.")
def cart_add(code: str, quantity: int) -> None:
    """Add a product to the cart (merges with an existing line)."""
    handler = AddToCartHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
        settings=settings_provider(),
    )

    try:
        dto = handler.handle(settings().register_id, code, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto, with_totals=False)


@click.command("update")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--qty", "quantity", required=True, type=int, help="New quantity (0 removes the line).")
def cart_update(product_id: str, quantity: int) -> None:
    """Change a line's quantity."""
    handler = UpdateCartQuantityHandler(cart_repo=cart_repository(), settings=settings_provider())

    try:
        dto = handler.handle(settings().register_id, product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto, with_totals=False)


@click.command("remove")
@click.option("--product", "product_id", required=True, help="Product ID.")
def cart_remove(product_id: str) -> None:
    """Remove a line from the cart."""
    handler = RemoveFromCartHandler(cart_repo=cart_repository(), settings=settings_provider())

    try:
        dto = handler.handle(settings().register_id, product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto, with_totals=False)


@click.command("discount")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--percent", required=True, help="Line discount percentage (0-100).")
def cart_discount(product_id: str, percent: str) -> None:
    """Set a line discount by hand."""
    handler = SetLineDiscountHandler(cart_repo=cart_repository(), settings=settings_provider())

    try:
        dto = handler.handle(settings().register_id, product_id, percent)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto, with_totals=False)


@click.command("promote")
@click.option("--customer", "customer_id", default=None, help="Loyalty member to attach.")
def cart_promote(customer_id: str | None) -> None:
    """Apply the active promotions to the cart."""
    handler = ApplyPromotionsHandler(
        cart_repo=cart_repository(),
        promotion_repo=promotion_repository(),
        settings=settings_provider(),
    )

    try:
        dto = handler.handle(settings().register_id, customer_id=customer_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto, with_totals=False)


@click.command("show")
@click.option("--discount", "cart_discount", default=None, help="Cart discount percentage (overrides promotions).")
def cart_show(cart_discount: str | None) -> None:
    """Show the cart with freshly computed totals."""
    handler = ShowCartHandler(cart_repo=cart_repository(), settings=settings_provider())

    try:
        dto = handler.handle(settings().register_id, cart_discount=cart_discount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(dto)


@click.command("clear")
def cart_clear() -> None:
    """Cancel the sale and empty the cart."""
    ClearCartHandler(cart_repo=cart_repository()).handle(settings().register_id)
    click.echo("Cart cleared.")


@click.command("hold")
@click.option("--note", default=None, help="Note to find the cart by later.")
def cart_hold(note: str | None) -> None:
    """Park the cart and start a new sale."""
    handler = HoldCartHandler(cart_repo=cart_repository(), held_repo=held_cart_repository())

    try:
        held_id = handler.handle(settings().register_id, note=note)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Cart held as #{held_id}.")


@click.command("resume")
@click.option("--id", "held_id", required=True, type=int, help="Held cart ID.")
def cart_resume(held_id: int) -> None:
    """Restore a held cart."""
    handler = ResumeHeldCartHandler(
        cart_repo=cart_repository(),
        held_repo=held_cart_repository(),
        settings=settings_provider(),
    )

    try:
        dto = handler.handle(settings().register_id, held_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Held cart #{held_id} resumed.")
    _display_cart(dto, with_totals=False)


@click.command("held")
def cart_held() -> None:
    """List this register's held carts."""
    held = ListHeldCartsHandler(held_repo=held_cart_repository()).handle(settings().register_id)

    if not held:
        click.echo("No held carts.")
        return

    click.echo(f"{'ID':<6} {'Lines':>6}  {'Held at':<22} Note")
    click.echo("-" * 50)
    for entry in held:
        click.echo(f"{entry.id:<6} {entry.line_count:>6}  {entry.held_at:<22} {entry.note or ''}")


@click.command("discard")
@click.option("--id", "held_id", required=True, type=int, help="Held cart ID.")
def cart_discard(held_id: int) -> None:
    """Throw away a held cart."""
    handler = DiscardHeldCartHandler(held_repo=held_cart_repository())

    try:
        handler.handle(held_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Held cart #{held_id} discarded.")
