"""Shared pytest fixtures for retireplan tests."""

from decimal import Decimal

import pytest

from retireplan.domain.entities import FinancialCategory, FinancialItem, Frequency, Owner


ITEMS_CSV = """category,amount,frequency,owner,name
income,300,monthly,self,Salary
expense,200,monthly,,Living costs
pension,100,monthly,self,State pension
asset,10000,once,,Savings
real_estate,250000,once,,Home
debt,50000,once,spouse,Mortgage
"""


@pytest.fixture
def sample_items():
    """A small household with one item per category."""
    return [
        FinancialItem(FinancialCategory.INCOME, Decimal("300"), Frequency.MONTHLY, Owner.SELF, "Salary"),
        FinancialItem(FinancialCategory.EXPENSE, Decimal("200"), Frequency.MONTHLY),
        FinancialItem(FinancialCategory.PENSION, Decimal("100"), Frequency.MONTHLY, Owner.SELF),
        FinancialItem(FinancialCategory.ASSET, Decimal("10000"), Frequency.ONCE),
        FinancialItem(FinancialCategory.REAL_ESTATE, Decimal("250000"), Frequency.ONCE),
        FinancialItem(FinancialCategory.DEBT, Decimal("50000"), Frequency.ONCE, Owner.SPOUSE),
    ]


@pytest.fixture
def items_csv(tmp_path):
    """Write the sample household to a CSV file and return its path."""
    path = tmp_path / "items.csv"
    path.write_text(ITEMS_CSV, encoding="utf-8")
    return str(path)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture(autouse=True)
def clear_assumption_env(monkeypatch):
    """Keep projection defaults independent of the developer's environment."""
    for name in (
        "RETIREPLAN_LIFE_EXPECTANCY",
        "RETIREPLAN_RETURN_RATE",
        "RETIREPLAN_INFLATION_RATE",
    ):
        monkeypatch.delenv(name, raising=False)
