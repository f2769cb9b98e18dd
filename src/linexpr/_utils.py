from __future__ import annotations

import math
import numbers
from decimal import Decimal
from typing import Any


def is_number(value: Any) -> bool:
    """Return True for real numbers, booleans excluded.

    Any `numbers.Real` is accepted (int, float, Fraction, NumPy scalars).
    `Decimal` is not a `numbers.Real` and is rejected.
    """
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def format_number(value: float) -> str:
    """Format a number the way constraint solvers print it.

    Uses the shortest round-trip digits, without a trailing `.0`. Decimal
    notation is kept for 1e-6 <= |value| < 1e21, exponent notation is used
    outside (`1e-7`, `1.5e+21`). Non-finite values are spelled out.

    Examples
    --------
    >>> format_number(2.0), format_number(0.00001), format_number(1e-7)
    ('2', '0.00001', '1e-7')
    >>> format_number(-math.inf)
    '-Infinity'

    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    # abs(value) == 0.<digits> * 10**point
    point = len(digit_tuple) + exponent

    if len(digits) <= point <= 21:
        text = digits + "0" * (point - len(digits))
    elif 0 < point <= 21:
        text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if point > 0 else '-'}{abs(point - 1)}"
    return sign + text
