"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("1970-03-15", "March 15, 1970") and the
    relative words "today", "yesterday" and "tomorrow".

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_year_month(value: str) -> date:
    """Parse a "YYYY-MM" string into the first day of that month.

    Raises:
        ValueError: If the value is not a valid year and month
    """
    text = value.strip()
    parts = text.split("-")
    if len(parts) != 2:
        raise ValueError(f"Expected YYYY-MM, got '{value}'")

    try:
        year, month = int(parts[0]), int(parts[1])
        return date(year, month, 1)
    except ValueError as e:
        raise ValueError(f"Could not parse year-month '{value}': {e}")


def calculate_age(birth_date: date, as_of: Optional[date] = None) -> int:
    """Return age in completed years at ``as_of`` (defaults to today)."""
    if as_of is None:
        as_of = date.today()
    return relativedelta(as_of, birth_date).years
