"""Domain layer for retireplan application."""

from retireplan.domain.item_import import ItemImportService
from retireplan.domain.plan import RetirementPlanService
from retireplan.domain.normalizer import calculate_monthly_totals, calculate_net_worth
from retireplan.domain.projection import (
    calculate_depletion_age,
    generate_retirement_simulation,
)
from retireplan.domain.scoring import calculate_scores, get_score_grade

__all__ = [
    "ItemImportService",
    "RetirementPlanService",
    "calculate_monthly_totals",
    "calculate_net_worth",
    "calculate_depletion_age",
    "generate_retirement_simulation",
    "calculate_scores",
    "get_score_grade",
]
