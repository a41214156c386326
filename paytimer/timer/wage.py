"""Turn whatever the wage field holds into a number."""

from __future__ import annotations

import math


def coerce_wage(value: object) -> float:
    """Return *value* as a finite float, or ``0.0`` when it isn't one.

    Strings are stripped and may use ``,`` as the decimal separator.
    Negative numbers are passed through unchanged.
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().replace(",", ".")
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return 0.0
    else:
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number
