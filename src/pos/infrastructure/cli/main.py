import click

from pos.infrastructure.bootstrap import settings
from pos.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_discard,
    cart_discount,
    cart_held,
    cart_hold,
    cart_promote,
    cart_remove,
    cart_resume,
    cart_show,
    cart_update,
)
from pos.infrastructure.cli.checkout_commands import checkout
from pos.infrastructure.cli.product_commands import product_add, product_list
from pos.infrastructure.cli.transaction_commands import transaction_list, transaction_show
from pos.infrastructure.logger import configure_logging


@click.group()
def cli() -> None:
    """POS register checkout."""
    configure_logging(settings())


@cli.group()
def product() -> None:
    """Manage the local product catalog."""


@cli.group()
def cart() -> None:
    """Ring up the register's open cart."""


@cli.group()
def transaction() -> None:
    """Look up committed transactions."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
cart.add_command(cart_add)
cart.add_command(cart_update)
cart.add_command(cart_remove)
cart.add_command(cart_discount)
cart.add_command(cart_promote)
cart.add_command(cart_show)
cart.add_command(cart_clear)
cart.add_command(cart_hold)
cart.add_command(cart_resume)
cart.add_command(cart_held)
cart.add_command(cart_discard)
cli.add_command(checkout)
transaction.add_command(transaction_show)
transaction.add_command(transaction_list)
