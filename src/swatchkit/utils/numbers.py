"""Numeric helpers shared by the conversion, parsing and control layers.

Colors arrive as text typed by users or stored by web front-ends, so the
helpers follow browser number semantics: half-up rounding, lenient
integer parsing and the shortest decimal rendering.
"""

import math
import re
from typing import Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def round_half_up(value: float, ndigits: Optional[int] = 0) -> float:
    """Round half away from negative infinity, like JavaScript's Math.round.

    Python's built-in round() uses banker's rounding (round(0.5) == 0),
    which would make 127.5 and 128.5 behave differently.

    Args:
        value: Number to round
        ndigits: Decimal places to keep; None returns the value unchanged

    Returns:
        The rounded value (an int when ndigits is 0)

    Example:
        >>> round_half_up(127.5)
        128
        >>> round_half_up(0.125, 2)
        0.13
    """
    if ndigits is None:
        return value
    if ndigits == 0:
        return math.floor(value + 0.5)
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp ``value`` to the closed interval [lower, upper]."""
    return max(lower, min(upper, value))


def format_number(value: float) -> str:
    """Render a number the way a browser would print it.

    Integral values lose their trailing ``.0`` so that ``1.0`` becomes
    ``"1"`` and ``0.5`` stays ``"0.5"``.
    """
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, float):
        return format(value, ".10g")
    return str(value)


def parse_int(text: Optional[str], default: int = 0) -> int:
    """Parse the leading integer of ``text`` (``"12.7"`` -> 12).

    Empty, missing or non-numeric text returns ``default``.
    """
    if not text:
        return default
    match = _LEADING_INT.match(text)
    if not match:
        return default
    return int(match.group(1))


def parse_float(text: Optional[str], default: Optional[float] = 0.0) -> Optional[float]:
    """Parse ``text`` as a float, returning ``default`` for partial input like ``"."``."""
    if not text:
        return default
    try:
        result = float(text)
    except ValueError:
        return default
    if math.isnan(result) or math.isinf(result):
        return default
    return result
