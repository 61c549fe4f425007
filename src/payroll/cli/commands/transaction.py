"""Transaction history commands."""

import click
from payroll.cli.error_handling import handle_domain_error
from payroll.domain.transaction import TransactionUsecase


@click.group()
def transaction_group():
    """View the balance transaction history."""
    pass


@transaction_group.command("list")
@click.option("--limit", type=int, default=20, show_default=True, help="Maximum rows to show (0 for all)")
@click.option("--offset", type=int, default=0, help="Rows to skip")
@click.pass_context
def list_transactions(ctx, limit: int, offset: int):
    """List transactions, newest first."""
    usecase = TransactionUsecase(ctx.obj["db"].transactions)

    try:
        transactions, _ = usecase.fetch(limit, offset)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\n{'ID':<6} {'Date':<20} {'Type':<7} {'Amount':>15}  Note")
    click.echo("-" * 80)
    for txn in transactions:
        created = txn.created_at.strftime("%Y-%m-%d %H:%M:%S") if txn.created_at else ""
        click.echo(
            f"{txn.id:<6} {created:<20} {txn.type.value:<7} {txn.amount:>15,.2f}  {txn.note}"
        )


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
