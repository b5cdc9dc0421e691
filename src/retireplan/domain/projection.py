"""Retirement projection engine."""

import logging
import math
from datetime import date
from typing import Optional, Sequence

from retireplan.domain.entities import SimulationDataPoint, SimulationParams
from retireplan.utils.rounding import round_half_up

logger = logging.getLogger(__name__)


def generate_retirement_simulation(
    params: SimulationParams, current_year: Optional[int] = None
) -> tuple[SimulationDataPoint, ...]:
    """Project assets year by year from current age to life expectancy.

    Each year the balance first grows by the annual return, then the net
    cash flow for that year is added. Labor income stops once retirement
    age is reached; pension is paid every year. Expenses inflate from the
    first year regardless of retirement.

    The loop stops after emitting the first year whose running balance is
    zero or below. Emitted assets are clamped to zero and rounded, but the
    stop check uses the unrounded balance.

    Args:
        params: Projection assumptions
        current_year: Calendar year of the first point (defaults to this year)

    Returns:
        Data points ordered by age, empty if current age exceeds life expectancy
    """
    if current_year is None:
        current_year = date.today().year

    data_points: list[SimulationDataPoint] = []
    assets = params.current_assets

    for age in range(params.current_age, params.life_expectancy + 1):
        years_from_now = age - params.current_age
        is_retired = age >= params.retirement_age

        annual_income = 0.0 if is_retired else params.monthly_income * 12
        annual_income += params.monthly_pension * 12

        inflation_factor = _compound(1 + params.inflation_rate, years_from_now)
        annual_expense = params.monthly_expense * 12 * inflation_factor

        net_cash_flow = annual_income - annual_expense
        assets = assets * (1 + params.annual_return_rate) + net_cash_flow

        data_points.append(
            SimulationDataPoint(
                age=age,
                year=current_year + years_from_now,
                assets=max(0, round_half_up(assets)),
                income=round_half_up(annual_income),
                expense=round_half_up(annual_expense),
            )
        )

        if assets <= 0:
            logger.debug("Assets depleted at age %d", age)
            break

    return tuple(data_points)


def _compound(base: float, years: int) -> float:
    try:
        return base**years
    except OverflowError:
        # Float overflow saturates; an odd power keeps a negative base's sign
        if base < 0 and years % 2:
            return -math.inf
        return math.inf


def calculate_depletion_age(simulation: Sequence[SimulationDataPoint]) -> Optional[int]:
    """Return the age at which displayed assets first reach zero.

    The first point is never considered, so a plan that starts at zero is
    not reported as depleted at its starting age.
    """
    for index, point in enumerate(simulation):
        if index == 0:
            continue
        if point.assets <= 0:
            return point.age
    return None
