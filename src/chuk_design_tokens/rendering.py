"""
Rendering of token values as CSS text.

Numbers are written the way stylesheet consumers have always seen
them, i.e. JavaScript's ``String(number)``: integral values without a
fraction ("2", "100"), others with the shortest round-tripping digits
("0.875"), and exponent notation only below 1e-6 or from 1e21 up
("1e-7", "1.5e+21").
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

# JavaScript switches to exponent notation outside this decimal-point range
_MAX_FIXED_EXPONENT = 21
_MIN_FIXED_EXPONENT = -6


def format_number(number: float) -> str:
    """Render a number for CSS output."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "-Infinity" if number < 0 else "Infinity"
    if number == 0:
        return "0"

    sign = "-" if number < 0 else ""
    shortest = Decimal(repr(abs(number))).normalize().as_tuple()
    digits = "".join(str(d) for d in shortest.digits)
    # value == 0.<digits> * 10**point
    point = shortest.exponent + len(digits)

    if len(digits) <= point <= _MAX_FIXED_EXPONENT:
        text = digits + "0" * (point - len(digits))
    elif 0 < point <= _MAX_FIXED_EXPONENT:
        text = f"{digits[:point]}.{digits[point:]}"
    elif _MIN_FIXED_EXPONENT < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        exponent = point - 1
        mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"

    return sign + text


def render_value(value: Any) -> str:
    """Render a token value as CSS text."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int | float):
        return format_number(float(value))
    if isinstance(value, Mapping):
        return " ".join(render_value(v) for v in value.values())
    if isinstance(value, list | tuple):
        return ", ".join(render_value(v) for v in value)
    if value is None:
        return ""
    return str(value)
