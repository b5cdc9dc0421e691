"""Retirement readiness scoring."""

from dataclasses import dataclass

from retireplan.domain.entities import ScoreGrade, Scores
from retireplan.utils.rounding import round_half_up

# Age at which retirement saving is assumed to begin
SAVING_START_AGE = 25

OVERALL_WEIGHTS = {
    "income": 0.2,
    "expense": 0.15,
    "asset": 0.35,
    "debt": 0.15,
    "pension": 0.15,
}

# (minimum score, grade, description), highest first
GRADE_BANDS = (
    (90, "A+", "Excellent"),
    (80, "A", "Very good"),
    (70, "B+", "Good"),
    (60, "B", "Fair"),
    (50, "C+", "Caution"),
    (40, "C", "Needs improvement"),
    (30, "D", "At risk"),
)
FAILING_GRADE = ScoreGrade(grade="F", description="Critical")


@dataclass(frozen=True)
class ScoringInputs:
    """Monthly figures and profile data the scores are derived from."""

    monthly_income: float
    monthly_expense: float
    total_assets: float
    total_debts: float
    net_worth: float
    target_retirement_fund: float
    current_age: int
    retirement_age: int
    monthly_pension: float


def calculate_scores(inputs: ScoringInputs) -> Scores:
    """Score each category 0-100 and combine them into a weighted overall score.

    Args:
        inputs: Figures to score

    Returns:
        Scores with every value clamped to 0-100
    """
    income = float(inputs.monthly_income)
    expense = float(inputs.monthly_expense)
    total_assets = float(inputs.total_assets)
    total_debts = float(inputs.total_debts)
    target = float(inputs.target_retirement_fund)

    savings_rate = (income - expense) / income if income > 0 else 0.0
    expense_ratio = expense / income if income > 0 else 1.0
    progress_rate = float(inputs.net_worth) / target if target > 0 else 0.0

    if total_assets > 0:
        debt_ratio = total_debts / total_assets
    else:
        debt_ratio = 1.0 if total_debts > 0 else 0.0

    pension_coverage = float(inputs.monthly_pension) / expense if expense > 0 else 0.0

    category_scores = {
        "income": income_score(savings_rate),
        "expense": expense_score(expense_ratio),
        "asset": asset_score(progress_rate, inputs.current_age, inputs.retirement_age),
        "debt": debt_score(debt_ratio),
        "pension": pension_score(pension_coverage),
    }

    overall = sum(
        category_scores[name] * weight for name, weight in OVERALL_WEIGHTS.items()
    )

    return Scores(
        overall=_clamp(overall),
        income=_clamp(category_scores["income"]),
        expense=_clamp(category_scores["expense"]),
        asset=_clamp(category_scores["asset"]),
        debt=_clamp(category_scores["debt"]),
        pension=_clamp(category_scores["pension"]),
    )


def income_score(savings_rate: float) -> float:
    """Score based on savings rate; 30% or more earns full marks."""
    if savings_rate >= 0.3:
        return 100
    if savings_rate >= 0.2:
        return 80 + (savings_rate - 0.2) * 200
    if savings_rate >= 0.1:
        return 60 + (savings_rate - 0.1) * 200
    if savings_rate >= 0:
        return savings_rate * 600
    return 0


def expense_score(expense_ratio: float) -> float:
    """Score based on spending as a share of income; 70% or less earns full marks."""
    if expense_ratio <= 0.7:
        return 100
    if expense_ratio <= 0.8:
        return 80 + (0.8 - expense_ratio) * 200
    if expense_ratio <= 0.9:
        return 60 + (0.9 - expense_ratio) * 200
    if expense_ratio <= 1:
        return 40 + (1 - expense_ratio) * 200
    return max(0, 40 - (expense_ratio - 1) * 100)


def asset_score(progress_rate: float, current_age: int, retirement_age: int) -> float:
    """Score progress toward the retirement fund against where it should be by now."""
    years_to_retirement = retirement_age - current_age
    if years_to_retirement > 0:
        saving_years = retirement_age - SAVING_START_AGE
        # Saving horizon of zero or less leaves nothing to compare against
        expected_progress = 1 - years_to_retirement / saving_years if saving_years else 0
    else:
        expected_progress = 1

    if expected_progress > 0:
        relative_progress = progress_rate / expected_progress
    else:
        relative_progress = progress_rate

    if relative_progress >= 1:
        return 100
    if relative_progress >= 0.8:
        return 80 + (relative_progress - 0.8) * 100
    if relative_progress >= 0.5:
        return 50 + (relative_progress - 0.5) * 100
    return relative_progress * 100


def debt_score(debt_ratio: float) -> float:
    """Score based on debt as a share of assets; 20% or less earns full marks."""
    if debt_ratio <= 0.2:
        return 100
    if debt_ratio <= 0.4:
        return 80 + (0.4 - debt_ratio) * 100
    if debt_ratio <= 0.6:
        return 60 + (0.6 - debt_ratio) * 100
    if debt_ratio <= 0.8:
        return 40 + (0.8 - debt_ratio) * 100
    if debt_ratio <= 1:
        return 20 + (1 - debt_ratio) * 100
    return max(0, 20 - (debt_ratio - 1) * 50)


def pension_score(pension_coverage: float) -> float:
    """Score based on pension as a share of expenses; 50% or more earns full marks."""
    if pension_coverage >= 0.5:
        return 100
    if pension_coverage >= 0.4:
        return 80 + (pension_coverage - 0.4) * 200
    if pension_coverage >= 0.3:
        return 60 + (pension_coverage - 0.3) * 200
    if pension_coverage >= 0.2:
        return 40 + (pension_coverage - 0.2) * 200
    return pension_coverage * 200


def get_score_grade(score: float) -> ScoreGrade:
    """Look up the letter grade for a score."""
    for minimum, grade, description in GRADE_BANDS:
        if score >= minimum:
            return ScoreGrade(grade=grade, description=description)
    return FAILING_GRADE


def _clamp(score: float) -> int:
    return min(100, max(0, round_half_up(score)))
