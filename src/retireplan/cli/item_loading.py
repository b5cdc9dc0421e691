"""CLI helpers for loading items and resolving the user's age."""

from __future__ import annotations

from datetime import date

import click

from retireplan.domain.entities import FinancialItem, Owner
from retireplan.domain.item_import import ItemImportService
from retireplan.domain.normalizer import filter_items
from retireplan.cli.error_handling import handle_domain_error
from retireplan.utils.date_parser import parse_date


def load_items_or_exit(
    ctx: click.Context, items_csv: str, owner: str | None = None
) -> list[FinancialItem]:
    """Read items from CSV, or exit with a CLI error.

    Rows that could not be parsed are reported on stderr and skipped.
    """
    service = ItemImportService()
    try:
        result = service.import_csv(items_csv)
        owner_filter = Owner.parse(owner) if owner else None
    except (ValueError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)

    for error in result.errors:
        click.echo(f"Warning: {error}", err=True)

    return filter_items(result.items, owner_filter)


def parse_birth_date_or_exit(ctx: click.Context, birth_date: str) -> date:
    """Parse a birth date option, or exit with a CLI error."""
    try:
        return parse_date(birth_date)
    except ValueError as e:
        click.echo(f"Error: Invalid birth date: {e}", err=True)
        ctx.exit(1)


def format_amount(value) -> str:
    """Format an amount with thousands separators and no decimals."""
    return f"{float(value):,.0f}"
