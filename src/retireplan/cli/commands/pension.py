"""Pension withdrawal command."""

import click

from retireplan.cli.error_handling import handle_domain_error
from retireplan.cli.item_loading import format_amount
from retireplan.domain.loan import calculate_annual_pension_withdrawal
from retireplan.utils.amount_parser import parse_amount, parse_rate


@click.command("pension")
@click.argument("balance")
@click.option(
    "--years",
    type=click.IntRange(min=1),
    required=True,
    help="Number of years the pension is paid out",
)
@click.option(
    "--return-rate",
    default="3%",
    show_default=True,
    help="Annual return on the remaining balance, e.g. 3% or 0.03",
)
@click.pass_context
def pension_withdrawal(ctx, balance: str, years: int, return_rate: str):
    """Show the yearly withdrawal that draws a pension balance down to zero.

    Examples:
        retireplan pension 300000 --years 20
        retireplan pension 300000 --years 25 --return-rate 4%
    """
    try:
        amount = parse_amount(balance)
        rate = parse_rate(return_rate)
    except ValueError as e:
        handle_domain_error(ctx, e)

    annual = calculate_annual_pension_withdrawal(float(amount), years, rate * 100)
    click.echo(f"Annual withdrawal:  {format_amount(annual)}")
    click.echo(f"Monthly equivalent: {format_amount(annual / 12)}")


def register_commands(cli):
    """Register pension commands with main CLI."""
    cli.add_command(pension_withdrawal)
