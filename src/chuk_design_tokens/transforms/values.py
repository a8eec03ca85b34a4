"""
Value transforms - pure functions from a raw token value to CSS text.

Numbers are written with ``rendering.format_number`` ("2rem", "0.875rem").
Input that doesn't parse as a number yields NaN, which is written to the
output as-is.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from chuk_design_tokens.constants import (
    BASE_FONT_SIZE_PX,
    DEFAULT_FONT_WEIGHT,
    FONT_STACKS,
    FONT_WEIGHTS,
    NAMED_COLORS,
)
from chuk_design_tokens.rendering import format_number

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_LEADING_INFINITY = re.compile(r"^\s*([+-]?)Infinity")
_HEX_PAIR = re.compile(r"^[0-9a-fA-F]{2}$")

NAN_HSL = "NaN,NaN%,NaN%"


def parse_float(raw: Any) -> float:
    """
    Parse the leading number of a value.

    "16" and "16px" both give 16.0; "abc", None and booleans give NaN.
    """
    if isinstance(raw, bool) or raw is None:
        return math.nan
    if isinstance(raw, int | float):
        return float(raw)

    text = str(raw)
    match = _LEADING_NUMBER.match(text)
    if match:
        return float(match.group(1))
    match = _LEADING_INFINITY.match(text)
    if match:
        return -math.inf if match.group(1) == "-" else math.inf
    return math.nan


def round_half_up(number: float) -> int:
    return math.floor(number + 0.5)


def to_fixed(number: float, digits: int) -> float:
    """Round to a fixed number of decimals, ties away from zero."""
    if math.isnan(number) or math.isinf(number):
        return number
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(number).quantize(quantum, rounding=ROUND_HALF_UP))


def _channel(pair: str) -> float:
    if not _HEX_PAIR.match(pair):
        return math.nan
    return int(pair, 16) / 255


def hex_to_rgb(color: str) -> tuple[float, float, float]:
    """
    Split a 3- or 6-digit hex color into normalized channels.

    Strings of any other length map to black. Invalid digits give NaN
    channels.
    """
    if len(color) == 4:
        return (
            _channel(color[1] * 2),
            _channel(color[2] * 2),
            _channel(color[3] * 2),
        )
    if len(color) == 7:
        return (_channel(color[1:3]), _channel(color[3:5]), _channel(color[5:7]))
    return (0.0, 0.0, 0.0)


def rgb_to_hsl(r: float, g: float, b: float) -> tuple[int, float, float]:
    """
    Convert normalized RGB to (hue degrees, saturation %, lightness %).

    Hue is rounded to whole degrees, saturation and lightness to one
    decimal.
    """
    cmin = min(r, g, b)
    cmax = max(r, g, b)
    delta = cmax - cmin

    if delta == 0:
        h = 0.0
    elif cmax == r:
        h = math.fmod((g - b) / delta, 6)
    elif cmax == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4

    hue = round_half_up(h * 60)
    if hue < 0:
        hue += 360
    hue %= 360

    lightness = (cmax + cmin) / 2
    saturation = 0.0 if delta == 0 else delta / (1 - abs(2 * lightness - 1))

    return hue, to_fixed(saturation * 100, 1), to_fixed(lightness * 100, 1)


def color_to_hsl(raw: Any) -> str:
    """
    Convert a hex or named color to an ``H,S%,L%`` triple.

    #FFFFFF -> 0,0%,100%
    """
    if not isinstance(raw, str):
        return "0,0%,0%"

    color = NAMED_COLORS.get(raw.strip().lower(), raw)
    r, g, b = hex_to_rgb(color)
    if any(math.isnan(c) for c in (r, g, b)):
        return NAN_HSL

    hue, saturation, lightness = rgb_to_hsl(r, g, b)
    return f"{hue},{format_number(saturation)}%,{format_number(lightness)}%"


def px_to_rem(raw: Any) -> str:
    """16 -> 1rem"""
    return f"{format_number(parse_float(raw) / BASE_FONT_SIZE_PX)}rem"


def to_px(raw: Any) -> str:
    """4 -> 4px"""
    return f"{format_number(parse_float(raw))}px"


def percentage_to_decimal(raw: Any) -> str:
    """50% -> 0.5"""
    return format_number(parse_float(str(raw).replace("%", "", 1)) / 100)


def font_weight(raw: Any) -> str:
    """Map a named Söhne weight to a CSS weight, 400 when unknown."""
    if isinstance(raw, str) and raw in FONT_WEIGHTS:
        return str(FONT_WEIGHTS[raw])
    return str(DEFAULT_FONT_WEIGHT)


def font_stack(name: str, raw: Any) -> str:
    """Quote the family and append the fallback stack for its role."""
    return f"'{raw}', {FONT_STACKS[name]}"
