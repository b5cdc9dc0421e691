"""CLI helpers for building a retirement profile from options."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import click

from retireplan.config import Assumptions
from retireplan.domain.entities import RetirementProfile
from retireplan.cli.item_loading import parse_birth_date_or_exit
from retireplan.utils.amount_parser import parse_amount, parse_rate


def resolve_profile_or_exit(
    ctx: click.Context,
    *,
    birth_date: str | None,
    current_age: int | None,
    retirement_age: int,
    life_expectancy: int | None,
    return_rate: str | None,
    inflation_rate: str | None,
    target_fund: str | None = None,
) -> RetirementProfile:
    """Build a profile from CLI options, falling back to configured assumptions."""
    if birth_date and current_age is not None:
        click.echo("Error: --birth-date and --current-age cannot be combined.", err=True)
        ctx.exit(1)
    if not birth_date and current_age is None:
        click.echo("Error: Either --birth-date or --current-age is required.", err=True)
        ctx.exit(1)

    assumptions: Assumptions = ctx.obj["assumptions"]

    parsed_birth_date: date | None = None
    if birth_date:
        parsed_birth_date = parse_birth_date_or_exit(ctx, birth_date)

    try:
        annual_return_rate = (
            parse_rate(return_rate) if return_rate else assumptions.annual_return_rate
        )
        inflation = (
            parse_rate(inflation_rate) if inflation_rate else assumptions.inflation_rate
        )
        target = parse_amount(target_fund) if target_fund else Decimal("0")
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    return RetirementProfile(
        retirement_age=retirement_age,
        birth_date=parsed_birth_date,
        life_expectancy=(
            life_expectancy if life_expectancy is not None else assumptions.life_expectancy
        ),
        annual_return_rate=annual_return_rate,
        inflation_rate=inflation,
        target_retirement_fund=target,
    )


def profile_options(func):
    """Attach the options shared by commands that run a plan."""
    options = [
        click.option("--birth-date", help="Birth date (YYYY-MM-DD)"),
        click.option("--current-age", type=int, help="Current age, instead of --birth-date"),
        click.option("--retirement-age", type=int, required=True, help="Planned retirement age"),
        click.option(
            "--life-expectancy", type=int, help="Last age to project (default 90)"
        ),
        click.option("--return-rate", help="Annual return, e.g. 0.05 or 5% (default 5%)"),
        click.option(
            "--inflation-rate", help="Annual inflation, e.g. 0.02 or 2% (default 2%)"
        ),
        click.option(
            "--owner",
            type=click.Choice(["self", "spouse"], case_sensitive=False),
            help="Only include items owned by this household member",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func
