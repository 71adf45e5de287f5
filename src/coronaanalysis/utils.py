"""
Numeric helpers shared by the calculator and the widgets.

Text typed into the inputs is parsed leniently (non-numeric text becomes NaN
instead of raising), and derived values are rounded and formatted the same
way everywhere so that NaN and infinity survive all the way to the screen.
"""
from __future__ import annotations

import math
import re
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float]

# Wide enough to quantize any finite double
_DECIMAL_CONTEXT = Context(prec=400)

# Leading numeric prefix, e.g. "12.5abc" -> "12.5", "-.5e3x" -> "-.5e3"
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
# A complete numeric literal (no trailing garbage)
_FULL_NUMBER = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\Z")


def round_half_up(value: Number, digits: int = 2) -> float:
    """
    Round to ``digits`` decimal places, ties away from zero.

    The exact binary value of the float is rounded, so 1.005 (stored as
    1.00499999...) gives 1.0. Non-finite values are returned unchanged.
    """
    value = float(value)
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT))


def format_number(value: Number, digits: int = 2) -> str:
    """
    Fixed-point text for display; NaN and infinities are spelled out.

    Magnitudes of 1e21 and above switch to exponent form ("1e+21"), the
    shortest text that reads back as the same float.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) >= 1e21:
        return repr(value)
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT))


def _literal_to_float(literal: str) -> float:
    if literal.lstrip("+-") == "Infinity":
        return -math.inf if literal.startswith("-") else math.inf
    return float(literal)


def parse_float(raw: Union[str, Number]) -> float:
    """
    Parse the leading number of ``raw``.

    Whitespace is skipped and trailing garbage ignored ("42 dyn" -> 42.0).
    Text without a leading number gives NaN.
    """
    if isinstance(raw, (int, float)):
        return float(raw)
    match = _FLOAT_PREFIX.match(str(raw).strip())
    if match is None:
        return math.nan
    return _literal_to_float(match.group(0))


def to_number(raw: Union[str, Number]) -> float:
    """
    Strict conversion used by the numeric inputs.

    Empty or blank text is 0, a complete numeric literal is parsed, anything
    else is NaN.
    """
    if isinstance(raw, (int, float)):
        return float(raw)
    text = str(raw).strip()
    if not text:
        return 0.0
    if _FULL_NUMBER.match(text) is None:
        return math.nan
    return _literal_to_float(text)


def format_input(value: Number) -> str:
    """Shortest text that reads back as ``value`` (48.0 -> '48'), for refilling inputs."""
    value = float(value)
    if not math.isfinite(value):
        return format_number(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)
