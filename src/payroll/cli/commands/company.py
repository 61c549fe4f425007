"""Company management commands."""

import click
from payroll.cli.amount_input import parse_amount_or_exit
from payroll.cli.error_handling import handle_domain_error
from payroll.domain.company import CompanyUsecase
from payroll.domain.entities import Company
from payroll.domain.requests import CompanyRequest, TopupCompanyBalance


def print_company(company: Company) -> None:
    """Print the company profile."""
    click.echo(f"Company: {company.name} (ID: {company.id})")
    click.echo(f"  Address: {company.address}")
    click.echo(f"  Balance: {company.balance:,.2f}")


@click.group()
def company_group():
    """Manage the company profile and balance."""
    pass


@company_group.command("show")
@click.pass_context
def show_company(ctx):
    """Show the company profile."""
    usecase = CompanyUsecase(ctx.obj["db"].companies)

    try:
        company, _ = usecase.get_company_info()
    except ValueError as e:
        handle_domain_error(ctx, e)
    print_company(company)


@company_group.command("set")
@click.argument("name")
@click.option("--address", default="", help="Company address")
@click.option("--balance", default="0", help="Opening balance (e.g., 200000)")
@click.pass_context
def set_company(ctx, name: str, address: str, balance: str):
    """Create the company, or replace its profile if it exists.

    Examples:
        payroll company set "Acme" --address "Cempaka St." --balance 200000
    """
    usecase = CompanyUsecase(ctx.obj["db"].companies)
    amount = parse_amount_or_exit(ctx, balance)

    try:
        company, _ = usecase.create_or_update_company(
            CompanyRequest(name=name, address=address, balance=amount)
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Saved company '{company.name}'")
    print_company(company)


@company_group.command("topup")
@click.argument("amount")
@click.pass_context
def topup_company(ctx, amount: str):
    """Add AMOUNT to the company balance.

    Examples:
        payroll company topup 500000
    """
    usecase = CompanyUsecase(ctx.obj["db"].companies)
    value = parse_amount_or_exit(ctx, amount)

    try:
        company, _ = usecase.topup_balance(TopupCompanyBalance(balance=value))
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Topped up {value:,.2f}")
    click.echo(f"  Balance: {company.balance:,.2f}")


def register_commands(cli):
    """Register company commands with main CLI."""
    cli.add_command(company_group, name="company")
