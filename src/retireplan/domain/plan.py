"""Retirement plan domain service."""

import logging
from datetime import date
from typing import Iterable, Optional

from retireplan.domain.entities import (
    FinancialItem,
    MonthlyTotals,
    RetirementProfile,
    RetirementReport,
    SimulationParams,
)
from retireplan.domain.errors import ValidationError
from retireplan.domain.normalizer import calculate_monthly_totals, calculate_net_worth
from retireplan.domain.projection import (
    calculate_depletion_age,
    generate_retirement_simulation,
)
from retireplan.domain.scoring import ScoringInputs, calculate_scores
from retireplan.utils.date_parser import calculate_age

logger = logging.getLogger(__name__)


class RetirementPlanService:
    """Service for building retirement reports from items and a profile."""

    def build_params(
        self,
        totals: MonthlyTotals,
        profile: RetirementProfile,
        current_age: int,
        current_assets: Optional[float] = None,
    ) -> SimulationParams:
        """Build projection assumptions from normalized totals.

        Args:
            totals: Monthly totals of the household's items
            profile: Profile with ages and rate assumptions
            current_age: Age at the start of the projection
            current_assets: Starting balance; defaults to financial assets
                only, since real estate is not drawn down

        Returns:
            SimulationParams for the projection engine
        """
        if current_assets is None:
            current_assets = float(totals.asset)

        return SimulationParams(
            current_age=current_age,
            retirement_age=profile.retirement_age,
            life_expectancy=profile.life_expectancy,
            current_assets=current_assets,
            monthly_income=float(totals.income),
            monthly_expense=float(totals.expense),
            monthly_pension=float(totals.pension),
            annual_return_rate=profile.annual_return_rate,
            inflation_rate=profile.inflation_rate,
        )

    def build_report(
        self,
        items: Iterable[FinancialItem],
        profile: RetirementProfile,
        as_of: Optional[date] = None,
        current_assets: Optional[float] = None,
        current_age: Optional[int] = None,
    ) -> RetirementReport:
        """Normalize items, run the projection and score the result.

        Args:
            items: Household financial items
            profile: Profile with birth date, ages and assumptions
            as_of: Date the plan is computed for (defaults to today)
            current_assets: Optional override of the starting balance
            current_age: Age to start from when the profile has no birth date

        Returns:
            RetirementReport

        Raises:
            ValidationError: If neither a birth date nor a current age is given
        """
        if as_of is None:
            as_of = date.today()

        if profile.birth_date is not None:
            current_age = calculate_age(profile.birth_date, as_of)
        elif current_age is None:
            raise ValidationError("A birth date or current age is required")

        totals = calculate_monthly_totals(items)
        net_worth = calculate_net_worth(totals)

        params = self.build_params(totals, profile, current_age, current_assets)
        simulation = generate_retirement_simulation(params, current_year=as_of.year)
        depletion_age = calculate_depletion_age(simulation)

        scores = calculate_scores(
            ScoringInputs(
                monthly_income=float(totals.income),
                monthly_expense=float(totals.expense),
                total_assets=float(totals.total_assets),
                total_debts=float(totals.debt),
                net_worth=float(net_worth),
                target_retirement_fund=float(profile.target_retirement_fund),
                current_age=current_age,
                retirement_age=profile.retirement_age,
                monthly_pension=float(totals.pension),
            )
        )

        logger.debug(
            "Built report for age %d: %d points, depletion age %s",
            current_age,
            len(simulation),
            depletion_age,
        )
        return RetirementReport(
            as_of=as_of,
            params=params,
            totals=totals,
            net_worth=net_worth,
            simulation=simulation,
            depletion_age=depletion_age,
            scores=scores,
        )
