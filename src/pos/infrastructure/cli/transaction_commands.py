"""CLI commands for committed transactions."""

from __future__ import annotations

import click

from pos.application.dto import TransactionDTO
from pos.application.list_transactions import ListTransactionsHandler
from pos.application.show_transaction import ShowTransactionHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import settings, transaction_repository


def display_receipt(dto: TransactionDTO) -> None:
    """Shared formatting for printing a transaction as a receipt."""
    click.echo(f"Transaction #{dto.id}  (branch {dto.branch_id}, register {dto.register_id})")
    click.echo(f"Created:  {dto.created_at}")
    if dto.customer_id:
        click.echo(f"Customer: {dto.customer_id}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Disc':>8} {'Total':>10}")
    click.echo(f"  {'-'*57}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} "
            f"{item.line_discount:>8} {item.line_subtotal:>10}"
        )
    click.echo(f"  {'-'*57}")
    click.echo(f"  {'Subtotal':<40} {dto.subtotal:>16}")
    click.echo(f"  {'Discount':<40} {'-' + dto.discount_amount:>16}")
    click.echo(f"  {'Tax':<40} {dto.tax_amount:>16}")
    click.echo(f"  {'Total':<40} {dto.total:>16}")
    click.echo(f"  {'Paid (' + dto.payment_method + ')':<40} {dto.amount_paid:>16}")
    click.echo(f"  {'Change':<40} {dto.change_amount:>16}")
    if dto.points_earned:
        click.echo(f"  {'Points earned':<40} {dto.points_earned:>16}")
    if dto.notes:
        click.echo(f"Notes: {dto.notes}")


@click.command("show")
@click.option("--id", "transaction_id", required=True, type=int, help="Transaction ID.")
def transaction_show(transaction_id: int) -> None:
    """Show a committed transaction."""
    handler = ShowTransactionHandler(transaction_repo=transaction_repository())

    try:
        dto = handler.handle(transaction_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_receipt(dto)


@click.command("list")
@click.option("--limit", default=20, show_default=True, type=int, help="Maximum rows.")
def transaction_list(limit: int) -> None:
    """List this branch's recent transactions."""
    handler = ListTransactionsHandler(transaction_repo=transaction_repository())
    rows = handler.handle(settings().branch_id, limit=limit)

    if not rows:
        click.echo("No transactions found.")
        return

    click.echo(f"{'ID':<6} {'Created':<22} {'Method':<8} {'Total':>10} {'Points':>7}")
    click.echo("-" * 57)
    for row in rows:
        click.echo(
            f"{row.id:<6} {row.created_at:<22} {row.payment_method:<8} {row.total:>10} {row.points_earned:>7}"
        )
