"""Main CLI entry point."""

import click
from payroll.cli.error_handling import handle_domain_error
from payroll.database.factories import create_sqlite_database
from payroll.utils.logging_utils import setup_logging

# Import and register all commands at module level
from payroll.cli.commands import (
    company,
    position,
    user,
    transaction,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides PAYROLL_DB_PATH environment variable)",
    envvar="PAYROLL_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="PAYROLL_LOG_LEVEL",
    help="Logging level",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Payroll - company balance and salary administration.

    Manage the company profile and balance, positions and employees, and
    let employees withdraw their salary against the company balance.
    """
    ctx.ensure_object(dict)
    setup_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            db = create_sqlite_database(database_path=db_path)
        except ValueError as e:
            handle_domain_error(ctx, e)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
company.register_commands(cli)
position.register_commands(cli)
user.register_commands(cli)
transaction.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
