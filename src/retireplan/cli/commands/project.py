"""Projection command."""

import click

from retireplan.cli.error_handling import handle_domain_error
from retireplan.cli.item_loading import format_amount, load_items_or_exit
from retireplan.cli.profile import profile_options, resolve_profile_or_exit
from retireplan.domain.export import export_report_json, export_simulation_csv
from retireplan.domain.plan import RetirementPlanService
from retireplan.utils.amount_parser import parse_amount


@click.command("project")
@click.argument("items_csv", type=click.Path(dir_okay=False))
@profile_options
@click.option(
    "--current-assets",
    help="Starting balance (defaults to the total of financial asset items)",
)
@click.option(
    "--export",
    "export_path",
    type=click.Path(dir_okay=False, writable=True),
    help="Also write the yearly projection to this CSV file",
)
@click.option("--json", "as_json", is_flag=True, help="Print the full report as JSON")
@click.pass_context
def project(
    ctx,
    items_csv: str,
    birth_date: str | None,
    current_age: int | None,
    retirement_age: int,
    life_expectancy: int | None,
    return_rate: str | None,
    inflation_rate: str | None,
    owner: str | None,
    current_assets: str | None,
    export_path: str | None,
    as_json: bool,
):
    """Project assets year by year until life expectancy.

    Labor income stops at retirement age, pensions are paid every year and
    expenses grow with inflation. The projection ends early if assets run
    out.

    Examples:
        retireplan project items.csv --birth-date 1970-05-01 --retirement-age 60
        retireplan project items.csv --current-age 45 --retirement-age 65 --return-rate 4%
        retireplan project items.csv --current-age 45 --retirement-age 65 --export out.csv
    """
    profile = resolve_profile_or_exit(
        ctx,
        birth_date=birth_date,
        current_age=current_age,
        retirement_age=retirement_age,
        life_expectancy=life_expectancy,
        return_rate=return_rate,
        inflation_rate=inflation_rate,
    )
    items = load_items_or_exit(ctx, items_csv, owner)

    starting_assets = None
    if current_assets:
        try:
            starting_assets = float(parse_amount(current_assets))
        except ValueError as e:
            handle_domain_error(ctx, e)

    service = RetirementPlanService()
    report = service.build_report(
        items, profile, current_assets=starting_assets, current_age=current_age
    )

    if export_path:
        try:
            rows = export_simulation_csv(report.simulation, export_path)
        except OSError as e:
            handle_domain_error(ctx, e)
        click.echo(f"Exported {rows} rows to {export_path}", err=as_json)

    if as_json:
        click.echo(export_report_json(report))
        return

    if not report.simulation:
        click.echo(
            f"Nothing to project: current age {report.params.current_age} is past "
            f"life expectancy {report.params.life_expectancy}."
        )
        return

    click.echo("\nRetirement Projection:")
    click.echo("-" * 70)
    click.echo(f"{'Age':>4} {'Year':>6} {'Income':>18} {'Expense':>18} {'Assets':>20}")
    click.echo("-" * 70)
    for point in report.simulation:
        marker = " *" if point.age == report.params.retirement_age else ""
        click.echo(
            f"{point.age:>4} {point.year:>6} {format_amount(point.income):>18} "
            f"{format_amount(point.expense):>18} {format_amount(point.assets):>20}{marker}"
        )
    click.echo("-" * 70)

    if report.depletion_age is not None:
        click.echo(f"Assets run out at age {report.depletion_age}.")
    else:
        final = report.simulation[-1]
        click.echo(
            f"Assets last through age {final.age} "
            f"with {format_amount(final.assets)} remaining."
        )


def register_commands(cli):
    """Register project command with main CLI."""
    cli.add_command(project)
