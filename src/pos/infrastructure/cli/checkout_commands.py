"""CLI command for checking out the register's cart."""

from __future__ import annotations

import asyncio

import click

from pos.application.show_transaction import to_dto
from pos.domain.exceptions import DomainException
from pos.domain.model.transaction import PaymentMethod
from pos.domain.model.value_objects import Money, Percent
from pos.infrastructure.bootstrap import cart_repository, checkout_coordinator, settings
from pos.infrastructure.cli.transaction_commands import display_receipt


@click.command("checkout")
@click.option(
    "--method",
    "payment_method",
    required=True,
    type=click.Choice([m.value for m in PaymentMethod]),
    help="Payment method.",
)
@click.option("--paid", "amount_paid", required=True, help="Amount tendered (e.g. 50.00).")
@click.option("--discount", "cart_discount", default=None, help="Cart discount percentage (overrides promotions).")
@click.option("--customer", "customer_id", default=None, help="Loyalty member to credit.")
@click.option("--notes", default=None, help="Free-text note stored with the transaction.")
def checkout(
    payment_method: str,
    amount_paid: str,
    cart_discount: str | None,
    customer_id: str | None,
    notes: str | None,
) -> None:
    """Price, validate and commit the cart."""
    carts = cart_repository()
    cart = carts.get(settings().register_id)
    coordinator = checkout_coordinator()

    try:
        if customer_id is not None:
            cart.attach_customer(customer_id)
        result = asyncio.run(
            coordinator.checkout(
                cart,
                PaymentMethod(payment_method),
                Money.of(amount_paid),
                cart_discount=None if cart_discount is None else Percent.of(cart_discount),
                notes=notes,
            )
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    # The coordinator cleared the cart only after the commit succeeded.
    # Saving it is a second write: if the process dies between the two,
    # the register reopens a sale that is already committed and the
    # cashier must clear it by hand (`pos cart clear`).
    carts.save(cart)
    display_receipt(to_dto(result.transaction_id, result.record))
