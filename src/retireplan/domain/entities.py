"""Domain model entities for retireplan.

These are pure data classes representing financial facts, assumptions and
projection results. They carry no I/O; loading items and rendering results
are handled by the import service and the CLI.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from retireplan.domain.errors import ValidationError, negative_amount, unknown_choice


class _ChoiceEnum(str, Enum):
    """String enum that parses case-insensitively from user input."""

    @classmethod
    def parse(cls, value: str):
        text = (value or "").strip().lower().replace("-", "_")
        for member in cls:
            if member.value == text:
                return member
        raise ValidationError(
            unknown_choice(cls.__name__, value, [m.value for m in cls])
        )


class FinancialCategory(_ChoiceEnum):
    """Category of a financial item."""

    INCOME = "income"
    EXPENSE = "expense"
    REAL_ESTATE = "real_estate"
    ASSET = "asset"
    DEBT = "debt"
    PENSION = "pension"

    @property
    def is_flow(self) -> bool:
        """True for recurring amounts, False for balances."""
        return self in (
            FinancialCategory.INCOME,
            FinancialCategory.EXPENSE,
            FinancialCategory.PENSION,
        )


class Frequency(_ChoiceEnum):
    """How often a flow amount recurs."""

    MONTHLY = "monthly"
    YEARLY = "yearly"
    ONCE = "once"


class Owner(_ChoiceEnum):
    """Household member an item belongs to."""

    SELF = "self"
    SPOUSE = "spouse"


class RepaymentType(_ChoiceEnum):
    """Loan repayment schedule."""

    BULLET = "bullet"
    AMORTIZING = "amortizing"
    EQUAL_PRINCIPAL = "equal_principal"
    GRACE = "grace"


class RateType(_ChoiceEnum):
    """Whether a debt's rate is fixed or tracks a base rate."""

    FIXED = "fixed"
    FLOATING = "floating"


@dataclass(frozen=True)
class FinancialItem:
    """A single financial fact entered by the user."""

    category: FinancialCategory
    amount: Decimal
    frequency: Frequency = Frequency.MONTHLY
    owner: Optional[Owner] = None
    name: Optional[str] = None

    def __post_init__(self):
        if self.amount < 0:
            raise ValidationError(negative_amount(self.amount))


@dataclass(frozen=True)
class SimulationParams:
    """Assumption set for one projection run."""

    current_age: int
    retirement_age: int
    current_assets: float
    monthly_income: float
    monthly_expense: float
    monthly_pension: float
    life_expectancy: int = 90
    annual_return_rate: float = 0.05
    inflation_rate: float = 0.02


@dataclass(frozen=True)
class SimulationDataPoint:
    """One year of projection output."""

    age: int
    year: int
    assets: int
    income: int
    expense: int


@dataclass(frozen=True)
class MonthlyTotals:
    """Items aggregated by category.

    Flow categories hold monthly equivalents; real_estate, asset and debt
    hold balances.
    """

    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")
    real_estate: Decimal = Decimal("0")
    asset: Decimal = Decimal("0")
    debt: Decimal = Decimal("0")
    pension: Decimal = Decimal("0")

    @property
    def net_worth(self) -> Decimal:
        return self.real_estate + self.asset - self.debt

    @property
    def total_assets(self) -> Decimal:
        return self.real_estate + self.asset

    @property
    def monthly_savings(self) -> Decimal:
        return self.income - self.expense


@dataclass(frozen=True)
class Scores:
    """Retirement readiness scores, each 0-100."""

    overall: int
    income: int
    expense: int
    asset: int
    debt: int
    pension: int


@dataclass(frozen=True)
class ScoreGrade:
    """Letter grade for a score."""

    grade: str
    description: str


@dataclass(frozen=True)
class RetirementProfile:
    """User profile and assumptions that feed a plan."""

    retirement_age: int
    birth_date: Optional[date] = None
    life_expectancy: int = 90
    annual_return_rate: float = 0.05
    inflation_rate: float = 0.02
    target_retirement_fund: Decimal = Decimal("0")


@dataclass(frozen=True)
class RetirementReport:
    """Everything derived for one profile and item list."""

    as_of: date
    params: SimulationParams
    totals: MonthlyTotals
    net_worth: Decimal
    simulation: tuple[SimulationDataPoint, ...]
    depletion_age: Optional[int]
    scores: Scores


@dataclass(frozen=True)
class LoanTerms:
    """Repayment terms of a debt. ``annual_rate`` is a percentage."""

    principal: float
    annual_rate: float
    maturity: date
    repayment_type: RepaymentType = RepaymentType.AMORTIZING
    start: Optional[date] = None
    grace_period_months: int = 0


@dataclass(frozen=True)
class LoanPayment:
    """Monthly installment and total interest over the loan's remaining term."""

    monthly_payment: int
    total_interest: int


@dataclass(frozen=True)
class LoanBalance:
    """Outstanding principal at a point in time."""

    remaining_principal: int
    months_remaining: int
    elapsed_months: int


@dataclass(frozen=True)
class YearlyRepayment:
    """Principal and interest paid on a loan during one calendar year."""

    year: int
    principal: int
    interest: int

    @property
    def total(self) -> int:
        return self.principal + self.interest


@dataclass(frozen=True)
class ItemImportResult:
    """Outcome of reading items from a CSV file."""

    items: tuple[FinancialItem, ...] = ()
    errors: tuple[str, ...] = ()
