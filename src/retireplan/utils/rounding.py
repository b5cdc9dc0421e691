"""Rounding helpers."""

import math
import sys


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going toward positive infinity.

    Python's round() uses banker's rounding; figures shown to users here
    follow the conventional half-up rule instead.

    NaN rounds to 0 and infinities saturate at +/- sys.maxsize, so the
    result is always an int.
    """
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return sys.maxsize if value > 0 else -sys.maxsize
    return int(math.floor(value + 0.5))
