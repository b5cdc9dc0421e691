"""Monthly totals command."""

import click

from retireplan.cli.item_loading import format_amount, load_items_or_exit
from retireplan.domain.normalizer import calculate_monthly_totals, calculate_net_worth


@click.command("totals")
@click.argument("items_csv", type=click.Path(dir_okay=False))
@click.option(
    "--owner",
    type=click.Choice(["self", "spouse"], case_sensitive=False),
    help="Only include items owned by this household member",
)
@click.pass_context
def show_totals(ctx, items_csv: str, owner: str | None):
    """Show monthly totals and net worth.

    Income, expense and pension are shown as monthly equivalents; real
    estate, assets and debt as balances. One-time flow items do not count
    toward the monthly figures.

    Examples:
        retireplan totals items.csv
        retireplan totals items.csv --owner spouse
    """
    items = load_items_or_exit(ctx, items_csv, owner)
    if not items:
        click.echo("No items found.")
        return

    totals = calculate_monthly_totals(items)

    click.echo("\nMonthly Totals:")
    click.echo("-" * 40)
    rows = [
        ("Income (monthly)", totals.income),
        ("Expense (monthly)", totals.expense),
        ("Pension (monthly)", totals.pension),
        ("Savings (monthly)", totals.monthly_savings),
        ("Real estate", totals.real_estate),
        ("Financial assets", totals.asset),
        ("Debt", totals.debt),
    ]
    for label, value in rows:
        click.echo(f"{label:<20} {format_amount(value):>19}")
    click.echo("-" * 40)
    click.echo(f"{'Net worth':<20} {format_amount(calculate_net_worth(totals)):>19}")


def register_commands(cli):
    """Register totals command with main CLI."""
    cli.add_command(show_totals)
