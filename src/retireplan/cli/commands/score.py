"""Score command."""

from dataclasses import asdict

import click

from retireplan.cli.item_loading import format_amount, load_items_or_exit
from retireplan.cli.profile import profile_options, resolve_profile_or_exit
from retireplan.domain.plan import RetirementPlanService
from retireplan.domain.scoring import get_score_grade


@click.command("score")
@click.argument("items_csv", type=click.Path(dir_okay=False))
@profile_options
@click.option(
    "--target-fund",
    required=True,
    help="Net worth you aim to have at retirement",
)
@click.pass_context
def score(
    ctx,
    items_csv: str,
    birth_date: str | None,
    current_age: int | None,
    retirement_age: int,
    life_expectancy: int | None,
    return_rate: str | None,
    inflation_rate: str | None,
    owner: str | None,
    target_fund: str,
):
    """Score retirement readiness from 0 to 100 per category.

    Examples:
        retireplan score items.csv --birth-date 1975-03-10 --retirement-age 60 --target-fund 500000
    """
    profile = resolve_profile_or_exit(
        ctx,
        birth_date=birth_date,
        current_age=current_age,
        retirement_age=retirement_age,
        life_expectancy=life_expectancy,
        return_rate=return_rate,
        inflation_rate=inflation_rate,
        target_fund=target_fund,
    )
    items = load_items_or_exit(ctx, items_csv, owner)

    report = RetirementPlanService().build_report(items, profile, current_age=current_age)

    click.echo("\nRetirement Readiness:")
    click.echo("-" * 50)
    for name, value in asdict(report.scores).items():
        grade = get_score_grade(value)
        click.echo(f"{name.capitalize():<10} {value:>5} {grade.grade:>4}  {grade.description}")
    click.echo("-" * 50)
    click.echo(f"{'Net worth':<20} {format_amount(report.net_worth):>20}")
    if report.depletion_age is not None:
        click.echo(f"{'Depletion age':<20} {report.depletion_age:>20}")


def register_commands(cli):
    """Register score command with main CLI."""
    cli.add_command(score)
