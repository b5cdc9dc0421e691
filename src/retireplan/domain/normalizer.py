"""Item normalization into monthly totals."""

import logging
from decimal import Decimal
from typing import Iterable, Optional

from retireplan.domain.entities import (
    FinancialCategory,
    FinancialItem,
    Frequency,
    MonthlyTotals,
    Owner,
)

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = Decimal(12)

# MonthlyTotals field for each category
_TOTALS_FIELD = {
    FinancialCategory.INCOME: "income",
    FinancialCategory.EXPENSE: "expense",
    FinancialCategory.REAL_ESTATE: "real_estate",
    FinancialCategory.ASSET: "asset",
    FinancialCategory.DEBT: "debt",
    FinancialCategory.PENSION: "pension",
}


def monthly_equivalent(item: FinancialItem) -> Decimal:
    """Return the per-month figure for an item.

    Yearly amounts are spread over twelve months. One-time amounts do not
    recur and contribute nothing.
    """
    if item.frequency == Frequency.YEARLY:
        return item.amount / MONTHS_PER_YEAR
    if item.frequency == Frequency.ONCE:
        return Decimal("0")
    return item.amount


def total_amount(item: FinancialItem) -> Decimal:
    """Return the face value for one-time items, else the monthly equivalent."""
    if item.frequency == Frequency.ONCE:
        return item.amount
    return monthly_equivalent(item)


def calculate_monthly_totals(items: Iterable[FinancialItem]) -> MonthlyTotals:
    """Aggregate items by category.

    Flow categories (income, expense, pension) add their monthly
    equivalent. Stock categories (real estate, asset, debt) add the raw
    amount whatever the frequency, since they describe a balance.

    Args:
        items: Financial items in any order

    Returns:
        MonthlyTotals for the six categories
    """
    sums = {name: Decimal("0") for name in _TOTALS_FIELD.values()}
    count = 0

    for item in items:
        if item.category.is_flow:
            contribution = monthly_equivalent(item)
        else:
            contribution = item.amount
        sums[_TOTALS_FIELD[item.category]] += contribution
        count += 1

    logger.debug("Normalized %d items into monthly totals", count)
    return MonthlyTotals(**sums)


def calculate_net_worth(totals: MonthlyTotals) -> Decimal:
    """Real estate plus financial assets, minus debt."""
    return totals.net_worth


def filter_items(
    items: Iterable[FinancialItem], owner: Optional[Owner] = None
) -> list[FinancialItem]:
    """Return items belonging to ``owner``; items without an owner count as self."""
    if owner is None:
        return list(items)
    return [item for item in items if (item.owner or Owner.SELF) == owner]
