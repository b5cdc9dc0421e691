"""Amount and rate parsing utilities."""

from decimal import Decimal, InvalidOperation
import math
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a non-negative Decimal.

    Handles various formats:
    - "1200"
    - "$1,200.50"
    - "₩3,000,000"
    - "  450 "

    Financial items carry their direction in the category, so a negative
    amount (leading minus or parentheses) is rejected.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed or is negative
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    if amount_str.startswith("(") and amount_str.endswith(")"):
        raise ValueError(f"Amount must not be negative: '{amount_str}'")

    # Remove currency symbols and thousands separators
    amount_str = re.sub(r"[$€£¥₩]", "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if amount < 0:
        raise ValueError(f"Amount must not be negative: '{amount_str}'")
    return amount


def parse_rate(rate_str: str) -> float:
    """Parse a rate into a fraction.

    "5%" becomes 0.05 while a bare "0.05" is taken as already fractional.
    Negative rates are allowed; the projection propagates them as given.

    Raises:
        ValueError: If the rate cannot be parsed
    """
    if rate_str is None or not str(rate_str).strip():
        raise ValueError("Empty rate string")

    text = str(rate_str).strip()
    is_percent = text.endswith("%")
    if is_percent:
        text = text[:-1].strip()

    try:
        value = float(text)
    except ValueError:
        raise ValueError(f"Could not parse rate '{rate_str}'")

    if not math.isfinite(value):
        raise ValueError(f"Could not parse rate '{rate_str}'")

    return value / 100 if is_percent else value
