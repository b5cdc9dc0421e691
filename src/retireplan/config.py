"""Default assumptions and environment overrides."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from retireplan.utils.amount_parser import parse_rate

DEFAULT_LIFE_EXPECTANCY = 90
DEFAULT_ANNUAL_RETURN_RATE = 0.05
DEFAULT_INFLATION_RATE = 0.02

# Loan rates are annual percentages
DEFAULT_BASE_RATE = 3.5
DEFAULT_DEBT_RATE = 3.5

ENV_LIFE_EXPECTANCY = "RETIREPLAN_LIFE_EXPECTANCY"
ENV_RETURN_RATE = "RETIREPLAN_RETURN_RATE"
ENV_INFLATION_RATE = "RETIREPLAN_INFLATION_RATE"


@dataclass(frozen=True)
class Assumptions:
    """Projection defaults used when the caller does not supply a value."""

    life_expectancy: int = DEFAULT_LIFE_EXPECTANCY
    annual_return_rate: float = DEFAULT_ANNUAL_RETURN_RATE
    inflation_rate: float = DEFAULT_INFLATION_RATE


def load_assumptions(environ: Optional[Mapping[str, str]] = None) -> Assumptions:
    """Load default assumptions, letting environment variables override them.

    Rates accept either fractions ("0.04") or percentages ("4%").

    Args:
        environ: Mapping to read from (defaults to os.environ)

    Raises:
        ValueError: If an environment value cannot be parsed
    """
    if environ is None:
        environ = os.environ

    life_expectancy = DEFAULT_LIFE_EXPECTANCY
    if environ.get(ENV_LIFE_EXPECTANCY):
        try:
            life_expectancy = int(environ[ENV_LIFE_EXPECTANCY])
        except ValueError:
            raise ValueError(
                f"{ENV_LIFE_EXPECTANCY} must be a whole number of years, "
                f"got '{environ[ENV_LIFE_EXPECTANCY]}'"
            )

    return_rate = DEFAULT_ANNUAL_RETURN_RATE
    if environ.get(ENV_RETURN_RATE):
        return_rate = parse_rate(environ[ENV_RETURN_RATE])

    inflation_rate = DEFAULT_INFLATION_RATE
    if environ.get(ENV_INFLATION_RATE):
        inflation_rate = parse_rate(environ[ENV_INFLATION_RATE])

    return Assumptions(
        life_expectancy=life_expectancy,
        annual_return_rate=return_rate,
        inflation_rate=inflation_rate,
    )
