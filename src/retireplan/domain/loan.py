"""Loan repayment calculations for debt items.

Rates are annual percentages (4.5 means 4.5%). Dates are month-granular;
only the year and month of each date are used.
"""

from datetime import date
from typing import Optional

from retireplan.config import DEFAULT_BASE_RATE, DEFAULT_DEBT_RATE
from retireplan.domain.entities import (
    LoanBalance,
    LoanPayment,
    LoanTerms,
    RateType,
    RepaymentType,
    YearlyRepayment,
)
from retireplan.utils.rounding import round_half_up


def months_between(start: date, end: date) -> int:
    """Whole months from ``start`` to ``end`` ignoring the day of month."""
    return (end.year - start.year) * 12 + (end.month - start.month)


def _monthly_rate(annual_rate: float) -> float:
    return (annual_rate or 0) / 100 / 12


def _level_payment(principal: float, monthly_rate: float, months: int) -> float:
    """Equal installment that repays ``principal`` over ``months``."""
    if monthly_rate == 0:
        return principal / months
    growth = (1 + monthly_rate) ** months
    return principal * (monthly_rate * growth) / (growth - 1)


def calculate_monthly_payment(
    terms: LoanTerms, as_of: Optional[date] = None
) -> LoanPayment:
    """Compute the monthly installment and total interest from ``as_of`` to maturity.

    Args:
        terms: Loan terms
        as_of: Reference month (defaults to ``terms.start``, then today)

    Returns:
        LoanPayment, zeros when there is nothing left to repay
    """
    if as_of is None:
        as_of = terms.start or date.today()

    principal = terms.principal
    total_months = months_between(as_of, terms.maturity)
    if not principal or total_months <= 0:
        return LoanPayment(monthly_payment=0, total_interest=0)

    monthly_rate = _monthly_rate(terms.annual_rate)

    if terms.repayment_type == RepaymentType.BULLET:
        monthly_interest = principal * monthly_rate
        return LoanPayment(
            monthly_payment=round_half_up(monthly_interest),
            total_interest=round_half_up(monthly_interest * total_months),
        )

    if terms.repayment_type == RepaymentType.AMORTIZING:
        payment = _level_payment(principal, monthly_rate, total_months)
        return LoanPayment(
            monthly_payment=round_half_up(payment),
            total_interest=round_half_up(payment * total_months - principal),
        )

    if terms.repayment_type == RepaymentType.EQUAL_PRINCIPAL:
        # Interest shrinks linearly; report the average installment
        total_interest = principal * monthly_rate * (total_months + 1) / 2
        average_payment = principal / total_months + total_interest / total_months
        return LoanPayment(
            monthly_payment=round_half_up(average_payment),
            total_interest=round_half_up(total_interest),
        )

    # Grace period: interest only, then equal installments
    grace = min(terms.grace_period_months, total_months - 1)
    repayment_months = total_months - grace
    grace_interest = principal * monthly_rate * grace
    payment = _level_payment(principal, monthly_rate, repayment_months)
    repayment_interest = payment * repayment_months - principal
    return LoanPayment(
        monthly_payment=round_half_up(payment),
        total_interest=round_half_up(grace_interest + repayment_interest),
    )


def calculate_remaining_balance(terms: LoanTerms, as_of: date) -> LoanBalance:
    """Outstanding principal at ``as_of``.

    The loan runs from ``terms.start`` (defaults to today) to maturity.
    """
    start = terms.start or date.today()

    total_months = months_between(start, terms.maturity)
    elapsed_months = max(0, months_between(start, as_of))
    months_remaining = max(0, total_months - elapsed_months)

    if not terms.principal or total_months <= 0 or elapsed_months >= total_months:
        return LoanBalance(
            remaining_principal=0,
            months_remaining=0,
            elapsed_months=elapsed_months,
        )

    remaining = _outstanding(terms, total_months, elapsed_months)
    return LoanBalance(
        remaining_principal=round_half_up(remaining),
        months_remaining=months_remaining,
        elapsed_months=elapsed_months,
    )


def calculate_yearly_principal_payment(terms: LoanTerms, year: int) -> int:
    """Principal repaid by the installments falling in calendar ``year``.

    Installment ``k`` is paid ``k`` months after the loan start, so a loan
    starting in January 2025 pays its first installment in February.
    """
    window = _installment_window(terms, year)
    if window is None:
        return 0
    total_months, first, last = window
    repaid = _outstanding(terms, total_months, first) - _outstanding(terms, total_months, last)
    return max(0, round_half_up(repaid))


def calculate_yearly_interest_payment(terms: LoanTerms, year: int) -> int:
    """Interest charged by the installments falling in calendar ``year``.

    Only months in which the loan is active count, so the start and
    maturity years are partial.
    """
    window = _installment_window(terms, year)
    if window is None:
        return 0
    total_months, first, last = window
    monthly_rate = _monthly_rate(terms.annual_rate)
    interest = sum(
        _outstanding(terms, total_months, paid) * monthly_rate
        for paid in range(first, last)
    )
    return max(0, round_half_up(interest))


def calculate_repayment_schedule(terms: LoanTerms) -> tuple[YearlyRepayment, ...]:
    """Yearly principal and interest from the start year through maturity."""
    start = terms.start or date.today()
    if not terms.principal or months_between(start, terms.maturity) <= 0:
        return ()

    return tuple(
        YearlyRepayment(
            year=year,
            principal=calculate_yearly_principal_payment(terms, year),
            interest=calculate_yearly_interest_payment(terms, year),
        )
        for year in range(start.year, terms.maturity.year + 1)
    )


def effective_debt_rate(
    rate: Optional[float],
    rate_type: RateType = RateType.FIXED,
    spread: float = 0,
    base_rate: float = DEFAULT_BASE_RATE,
    default_rate: float = DEFAULT_DEBT_RATE,
) -> float:
    """Annual percentage actually charged on a debt.

    A floating rate is the base rate plus the spread. A fixed rate is used
    as entered, falling back to ``default_rate`` when none was entered.
    """
    if rate_type == RateType.FLOATING:
        return base_rate + (spread or 0)
    return default_rate if rate is None else rate


def _installment_window(terms: LoanTerms, year: int) -> Optional[tuple[int, int, int]]:
    """Installments ``(first, last]`` paid during ``year``, with the term length."""
    start = terms.start or date.today()
    total_months = months_between(start, terms.maturity)
    if not terms.principal or total_months <= 0:
        return None

    def paid_by(month: date) -> int:
        return min(total_months, max(0, months_between(start, month)))

    first = paid_by(date(year - 1, 12, 1))
    last = paid_by(date(year, 12, 1))
    if last <= first:
        return None
    return total_months, first, last


def _outstanding(terms: LoanTerms, total_months: int, paid_months: int) -> float:
    """Principal left after ``paid_months`` installments."""
    principal = terms.principal
    if paid_months >= total_months:
        return 0.0

    monthly_rate = _monthly_rate(terms.annual_rate)

    if terms.repayment_type == RepaymentType.BULLET:
        return principal
    if terms.repayment_type == RepaymentType.AMORTIZING:
        return _amortized_balance(principal, monthly_rate, total_months, paid_months)
    if terms.repayment_type == RepaymentType.EQUAL_PRINCIPAL:
        return principal - principal / total_months * paid_months

    grace = min(terms.grace_period_months, total_months - 1)
    if paid_months <= grace:
        return principal
    return _amortized_balance(
        principal, monthly_rate, total_months - grace, paid_months - grace
    )


def _amortized_balance(
    principal: float, monthly_rate: float, total_months: int, elapsed_months: int
) -> float:
    if monthly_rate == 0:
        return principal - principal / total_months * elapsed_months
    factor = (1 + monthly_rate) ** total_months
    elapsed_factor = (1 + monthly_rate) ** elapsed_months
    return principal * (factor - elapsed_factor) / (factor - 1)


def pmt(present_value: float, periods: int, rate_percent: float) -> float:
    """Level payment per period for ``present_value`` at ``rate_percent`` per period."""
    if periods <= 0:
        return 0.0
    return _level_payment(present_value, rate_percent / 100, periods)


def calculate_annual_pension_withdrawal(
    balance: float, receiving_years: int, annual_return_rate: float = 3
) -> int:
    """Yearly amount that draws a pension balance down to zero over ``receiving_years``."""
    if balance <= 0 or receiving_years <= 0:
        return 0
    return round_half_up(pmt(balance, receiving_years, annual_return_rate))
