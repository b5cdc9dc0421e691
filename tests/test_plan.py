"""Tests for the retirement plan service."""

from datetime import date
from decimal import Decimal

import pytest

from retireplan.domain.entities import RetirementProfile
from retireplan.domain.errors import ValidationError
from retireplan.domain.normalizer import calculate_monthly_totals
from retireplan.domain.plan import RetirementPlanService

AS_OF = date(2025, 6, 1)


@pytest.fixture
def profile():
    return RetirementProfile(
        retirement_age=60,
        birth_date=date(1966, 1, 1),
        life_expectancy=61,
        target_retirement_fund=Decimal("400000"),
    )


def test_build_params_from_totals(sample_items, profile):
    totals = calculate_monthly_totals(sample_items)
    params = RetirementPlanService().build_params(totals, profile, current_age=59)

    assert params.current_age == 59
    assert params.retirement_age == 60
    assert params.life_expectancy == 61
    assert params.current_assets == 10000
    assert params.monthly_income == 300
    assert params.monthly_expense == 200
    assert params.monthly_pension == 100
    assert params.annual_return_rate == 0.05
    assert params.inflation_rate == 0.02


def test_build_params_current_assets_override(sample_items, profile):
    totals = calculate_monthly_totals(sample_items)
    params = RetirementPlanService().build_params(
        totals, profile, current_age=59, current_assets=75000
    )
    assert params.current_assets == 75000


def test_build_report(sample_items, profile):
    report = RetirementPlanService().build_report(sample_items, profile, as_of=AS_OF)

    assert report.as_of == AS_OF
    assert report.params.current_age == 59
    assert report.net_worth == Decimal("210000")
    assert [p.age for p in report.simulation] == [59, 60, 61]
    assert [p.year for p in report.simulation] == [2025, 2026, 2027]
    assert report.simulation[0].assets == 12900
    assert report.simulation[1].assets == 12297
    assert report.depletion_age is None
    assert 0 <= report.scores.overall <= 100


def test_age_uses_completed_years(sample_items):
    profile = RetirementProfile(retirement_age=65, birth_date=date(1980, 6, 2))
    report = RetirementPlanService().build_report(sample_items, profile, as_of=AS_OF)
    assert report.params.current_age == 44


def test_current_age_without_birth_date(sample_items):
    profile = RetirementProfile(retirement_age=65, life_expectancy=70)
    report = RetirementPlanService().build_report(
        sample_items, profile, as_of=AS_OF, current_age=68
    )
    assert [p.age for p in report.simulation] == [68, 69, 70]


def test_birth_date_or_age_required(sample_items):
    profile = RetirementProfile(retirement_age=65)
    with pytest.raises(ValidationError):
        RetirementPlanService().build_report(sample_items, profile, as_of=AS_OF)


def test_one_time_items_do_not_reach_projection(sample_items, profile):
    """One-time income is not added to the starting balance or yearly flows."""
    from retireplan.domain.entities import FinancialCategory, FinancialItem, Frequency

    windfall = FinancialItem(FinancialCategory.INCOME, Decimal("1000000"), Frequency.ONCE)
    service = RetirementPlanService()

    baseline = service.build_report(sample_items, profile, as_of=AS_OF)
    with_windfall = service.build_report(sample_items + [windfall], profile, as_of=AS_OF)

    assert with_windfall.simulation == baseline.simulation


def test_past_life_expectancy_gives_empty_projection(sample_items):
    profile = RetirementProfile(retirement_age=60, birth_date=date(1950, 1, 1), life_expectancy=65)
    report = RetirementPlanService().build_report(sample_items, profile, as_of=AS_OF)

    assert report.simulation == ()
    assert report.depletion_age is None
