"""Loan repayment commands."""

from datetime import date
import math

import click

from retireplan.cli.error_handling import handle_domain_error
from retireplan.cli.item_loading import format_amount
from retireplan.config import DEFAULT_BASE_RATE, DEFAULT_DEBT_RATE
from retireplan.domain.entities import LoanTerms, RateType, RepaymentType
from retireplan.domain.loan import (
    calculate_monthly_payment,
    calculate_remaining_balance,
    calculate_repayment_schedule,
    effective_debt_rate,
)
from retireplan.utils.amount_parser import parse_amount
from retireplan.utils.date_parser import parse_date, parse_year_month

REPAYMENT_CHOICES = [t.value for t in RepaymentType]
RATE_TYPE_CHOICES = [t.value for t in RateType]


@click.group()
def loan_group():
    """Calculate loan repayments for debt items."""
    pass


def _loan_options(func):
    options = [
        click.argument("principal"),
        click.option(
            "--rate",
            type=float,
            help=f"Annual interest rate in percent, e.g. 4.5 (fixed rate, defaults to {DEFAULT_DEBT_RATE})",
        ),
        click.option(
            "--rate-type",
            type=click.Choice(RATE_TYPE_CHOICES, case_sensitive=False),
            default=RateType.FIXED.value,
            show_default=True,
            help="Fixed rate, or floating at --base-rate plus --spread",
        ),
        click.option("--spread", type=float, default=0.0, help="Spread over the base rate in percent"),
        click.option(
            "--base-rate",
            type=float,
            default=DEFAULT_BASE_RATE,
            show_default=True,
            help="Base rate in percent for floating-rate loans",
        ),
        click.option("--maturity", required=True, help="Maturity month (YYYY-MM)"),
        click.option(
            "--type",
            "repayment_type",
            type=click.Choice(REPAYMENT_CHOICES, case_sensitive=False),
            default=RepaymentType.AMORTIZING.value,
            show_default=True,
            help="Repayment schedule",
        ),
        click.option(
            "--grace-months",
            type=click.IntRange(min=0),
            default=0,
            help="Interest-only months before repayment starts (grace type only)",
        ),
        click.option("--start", help="Month the loan started (YYYY-MM)"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _build_terms(
    ctx,
    principal,
    rate,
    rate_type,
    spread,
    base_rate,
    maturity,
    repayment_type,
    grace_months,
    start,
) -> LoanTerms:
    try:
        annual_rate = effective_debt_rate(
            rate, RateType.parse(rate_type), spread=spread, base_rate=base_rate
        )
        if not math.isfinite(annual_rate):
            raise ValueError(f"Interest rate must be a finite number, got {annual_rate}")
        return LoanTerms(
            principal=float(parse_amount(principal)),
            annual_rate=annual_rate,
            maturity=parse_year_month(maturity),
            repayment_type=RepaymentType.parse(repayment_type),
            start=parse_year_month(start) if start else None,
            grace_period_months=grace_months,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)


@loan_group.command("payment")
@_loan_options
@click.pass_context
def loan_payment(ctx, **loan_args):
    """Show the monthly installment and total interest.

    The term runs from --start (or this month) to --maturity.

    Examples:
        retireplan loan payment 120000 --rate 4.5 --maturity 2035-06
        retireplan loan payment 300000 --rate 3.9 --maturity 2040-01 --type grace --grace-months 12
        retireplan loan payment 200000 --rate-type floating --spread 1.2 --maturity 2040-01
    """
    terms = _build_terms(ctx, **loan_args)
    result = calculate_monthly_payment(terms)

    if result.monthly_payment == 0 and result.total_interest == 0:
        click.echo("Nothing to repay: the loan has matured or has no principal.")
        return

    click.echo(f"Monthly payment: {format_amount(result.monthly_payment)}")
    click.echo(f"Total interest:  {format_amount(result.total_interest)}")


@loan_group.command("balance")
@_loan_options
@click.option("--as-of", help="Date to compute the balance for (defaults to today)")
@click.pass_context
def loan_balance(ctx, as_of, **loan_args):
    """Show the outstanding principal at a date.

    Examples:
        retireplan loan balance 120000 --rate 4.5 --start 2020-01 --maturity 2035-06
        retireplan loan balance 120000 --rate 4.5 --start 2020-01 --maturity 2035-06 --as-of 2030-01-01
    """
    terms = _build_terms(ctx, **loan_args)

    as_of_date = date.today()
    if as_of:
        try:
            as_of_date = parse_date(as_of)
        except ValueError as e:
            click.echo(f"Error: Invalid --as-of date: {e}", err=True)
            ctx.exit(1)

    result = calculate_remaining_balance(terms, as_of_date)
    click.echo(f"Remaining principal: {format_amount(result.remaining_principal)}")
    click.echo(f"Months elapsed:      {result.elapsed_months}")
    click.echo(f"Months remaining:    {result.months_remaining}")


@loan_group.command("schedule")
@_loan_options
@click.pass_context
def loan_schedule(ctx, **loan_args):
    """Show principal and interest paid in each calendar year.

    Examples:
        retireplan loan schedule 120000 --rate 4.5 --start 2020-01 --maturity 2035-06
    """
    terms = _build_terms(ctx, **loan_args)
    schedule = calculate_repayment_schedule(terms)

    if not schedule:
        click.echo("Nothing to repay: the loan has matured or has no principal.")
        return

    click.echo(f"Effective rate: {terms.annual_rate:.2f}%")
    click.echo()
    click.echo(f"{'Year':<6} {'Principal':>14} {'Interest':>12} {'Total':>14}")
    click.echo("-" * 49)
    for row in schedule:
        click.echo(
            f"{row.year:<6} {format_amount(row.principal):>14} "
            f"{format_amount(row.interest):>12} {format_amount(row.total):>14}"
        )


def register_commands(cli):
    """Register loan commands with main CLI."""
    cli.add_command(loan_group, name="loan")
