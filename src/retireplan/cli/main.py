"""Main CLI entry point."""

import logging

import click

from retireplan.config import load_assumptions

# Import and register all commands at module level
from retireplan.cli.commands import (
    totals,
    project,
    score,
    loan,
    pension,
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr")
@click.pass_context
def cli(ctx, verbose: bool):
    """Retireplan - Retirement cash-flow projection.

    Load household income, expenses, assets, debts and pensions from a CSV
    file, project assets to life expectancy and score retirement readiness.

    Default assumptions can be set with RETIREPLAN_LIFE_EXPECTANCY,
    RETIREPLAN_RETURN_RATE and RETIREPLAN_INFLATION_RATE.
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )

    # Only resolve assumptions when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            ctx.obj["assumptions"] = load_assumptions()
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)


# Register all commands
totals.register_commands(cli)
project.register_commands(cli)
score.register_commands(cli)
loan.register_commands(cli)
pension.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
