"""Position management commands."""

import click
from payroll.cli.amount_input import parse_amount_or_exit
from payroll.cli.error_handling import handle_domain_error
from payroll.domain.entities import Position
from payroll.domain.position import PositionUsecase
from payroll.domain.requests import PositionRequest


def format_position(position: Position) -> str:
    """Format a position as a single line."""
    return f"ID: {position.id:3d} | {position.name:20s} | Salary: {position.salary:,.2f}"


@click.group()
def position_group():
    """Manage positions."""
    pass


@position_group.command("list")
@click.option("--limit", type=int, default=0, help="Maximum rows to show (0 for all)")
@click.option("--offset", type=int, default=0, help="Rows to skip")
@click.pass_context
def list_positions(ctx, limit: int, offset: int):
    """List positions."""
    usecase = PositionUsecase(ctx.obj["db"].positions)

    try:
        positions = usecase.fetch_position(limit, offset)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not positions:
        click.echo("No positions found.")
        return

    click.echo("\nPositions:")
    click.echo("-" * 60)
    for position in positions:
        click.echo(format_position(position))


@position_group.command("show")
@click.argument("position_id", type=int)
@click.pass_context
def show_position(ctx, position_id: int):
    """Show a position."""
    usecase = PositionUsecase(ctx.obj["db"].positions)

    try:
        position = usecase.get_by_id(position_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(format_position(position))


@position_group.command("create")
@click.argument("name")
@click.argument("salary")
@click.pass_context
def create_position(ctx, name: str, salary: str):
    """Create a position with a fixed SALARY.

    Examples:
        payroll position create "Manager" 200000
    """
    usecase = PositionUsecase(ctx.obj["db"].positions)
    amount = parse_amount_or_exit(ctx, salary)

    try:
        position = usecase.store_position(PositionRequest(name=name, salary=amount))
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created position '{position.name}' (ID: {position.id})")


@position_group.command("edit")
@click.argument("position_id", type=int)
@click.argument("name")
@click.argument("salary")
@click.pass_context
def edit_position(ctx, position_id: int, name: str, salary: str):
    """Replace name and salary of a position."""
    usecase = PositionUsecase(ctx.obj["db"].positions)
    amount = parse_amount_or_exit(ctx, salary)

    try:
        position = usecase.edit_position(position_id, PositionRequest(name=name, salary=amount))
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated position {position.id}")
    click.echo(format_position(position))


@position_group.command("delete")
@click.argument("position_id", type=int)
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_position(ctx, position_id: int, yes: bool):
    """Delete a position.

    A position can only be deleted when no user holds it.
    """
    usecase = PositionUsecase(ctx.obj["db"].positions)

    if not yes and not click.confirm(f"Are you sure you want to delete position {position_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        usecase.destroy_position(position_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted position {position_id}")


def register_commands(cli):
    """Register position commands with main CLI."""
    cli.add_command(position_group, name="position")
