"""CLI error handling helpers."""

import click

from payroll.domain.errors import DomainError, status_of


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error with its status code and exit with failure."""
    status = status_of(error)
    click.echo(f"Error: {error} ({int(status)} {status.phrase})", err=True)
    ctx.exit(1)
