"""CLI helpers for amount parsing and error handling."""

from __future__ import annotations

from decimal import Decimal

import click
from payroll.utils.amount_parser import parse_amount


def parse_amount_or_exit(ctx: click.Context, value: str) -> Decimal:
    """Parse an amount argument, or exit with a CLI error.

    This keeps error messaging and exit behavior consistent across commands.
    """
    try:
        return parse_amount(value)
    except ValueError as exc:
        click.echo(f"Error: Invalid amount format: {exc}", err=True)
        ctx.exit(1)
