"""User (employee) management commands."""

import click
from payroll.cli.error_handling import handle_domain_error
from payroll.domain.entities import User
from payroll.domain.requests import UserRequest, WithdrawRequest
from payroll.domain.user import UserUsecase


def _usecase(ctx) -> UserUsecase:
    db = ctx.obj["db"]
    return UserUsecase(db.users, db.positions, db.companies)


def print_user(user: User) -> None:
    """Print a user with the resolved position."""
    click.echo(f"User: {user.name} (ID: {user.id})")
    click.echo(f"  Email: {user.email}")
    click.echo(f"  Phone: {user.phone}")
    click.echo(f"  Address: {user.address}")
    if user.position is not None:
        click.echo(f"  Position: {user.position.name} (salary {user.position.salary:,.2f})")
    else:
        click.echo(f"  Position ID: {user.position_id}")


def user_options(func):
    """Options shared by create and edit."""
    options = [
        click.option("--secret-id", required=True, help="Secret id required to withdraw salary"),
        click.option("--name", required=True, help="Full name"),
        click.option("--email", required=True, help="Email address"),
        click.option("--phone", default="", help="Phone number"),
        click.option("--address", default="", help="Home address"),
        click.option("--position", "position_id", type=int, required=True, help="Position ID"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
def user_group():
    """Manage employees."""
    pass


@user_group.command("list")
@click.option("--limit", type=int, default=0, help="Maximum rows to show (0 for all)")
@click.option("--offset", type=int, default=0, help="Rows to skip")
@click.pass_context
def list_users(ctx, limit: int, offset: int):
    """List employees."""
    try:
        users = _usecase(ctx).fetch_user(limit, offset)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not users:
        click.echo("No users found.")
        return

    click.echo("\nUsers:")
    click.echo("-" * 60)
    for user in users:
        position_name = user.position.name if user.position is not None else "-"
        click.echo(f"ID: {user.id:3d} | {user.name:20s} | {user.email:25s} | {position_name}")


@user_group.command("show")
@click.argument("user_id", type=int)
@click.pass_context
def show_user(ctx, user_id: int):
    """Show an employee."""
    try:
        user = _usecase(ctx).get_by_id(user_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    print_user(user)


@user_group.command("create")
@user_options
@click.pass_context
def create_user(ctx, secret_id, name, email, phone, address, position_id):
    """Create an employee in an existing position.

    Examples:
        payroll user create --secret-id s3cr3t --name "Jane" --email jane@acme.test --position 1
    """
    request = UserRequest(
        secret_id=secret_id,
        name=name,
        email=email,
        phone=phone,
        address=address,
        position_id=position_id,
    )
    try:
        user = _usecase(ctx).store_user(request)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created user '{user.name}' (ID: {user.id})")


@user_group.command("edit")
@click.argument("user_id", type=int)
@user_options
@click.pass_context
def edit_user(ctx, user_id, secret_id, name, email, phone, address, position_id):
    """Replace every field of an employee."""
    request = UserRequest(
        secret_id=secret_id,
        name=name,
        email=email,
        phone=phone,
        address=address,
        position_id=position_id,
    )
    try:
        user = _usecase(ctx).edit_user(user_id, request)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated user {user.id}")
    print_user(user)


@user_group.command("delete")
@click.argument("user_id", type=int)
@click.option("--yes", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_user(ctx, user_id: int, yes: bool):
    """Delete an employee."""
    if not yes and not click.confirm(f"Are you sure you want to delete user {user_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        _usecase(ctx).destroy_user(user_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted user {user_id}")


@user_group.command("withdraw")
@click.argument("user_id", type=int)
@click.option("--secret-id", prompt=True, hide_input=True, help="The employee's secret id")
@click.pass_context
def withdraw_salary(ctx, user_id: int, secret_id: str):
    """Withdraw the employee's salary from the company balance.

    Examples:
        payroll user withdraw 1 --secret-id s3cr3t
    """
    try:
        _usecase(ctx).withdraw_salary(WithdrawRequest(id=user_id, secret_id=secret_id))
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Salary withdrawn for user {user_id}")


def register_commands(cli):
    """Register user commands with main CLI."""
    cli.add_command(user_group, name="user")
