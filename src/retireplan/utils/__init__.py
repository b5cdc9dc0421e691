"""Utility functions for retireplan."""

from retireplan.utils.date_parser import parse_date, parse_year_month, calculate_age
from retireplan.utils.amount_parser import parse_amount, parse_rate
from retireplan.utils.rounding import round_half_up

__all__ = [
    "parse_date",
    "parse_year_month",
    "calculate_age",
    "parse_amount",
    "parse_rate",
    "round_half_up",
]
