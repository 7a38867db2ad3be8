"""CSS units and number formatting."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Literal

from ..config import ABSOLUTE_UNITS, RELATIVE_UNITS
from ..errors import UnitError

Unit = Literal["cm", "mm", "Q", "in", "pc", "pt", "px", "em", "rem"]

UNITS: tuple[str, ...] = ABSOLUTE_UNITS + RELATIVE_UNITS

# Enough to hide binary float noise (0.1 + 0.2) without touching real digits.
_MAX_DECIMALS = 10

# Wide enough for any float written out in fixed-point.
_CONTEXT = Context(prec=400)


def validate_unit(unit: str | None) -> str | None:
    """Return the unit unchanged, raising UnitError when it is not recognized."""
    if unit is None or unit in UNITS:
        return unit
    raise UnitError(unit)


def is_relative(unit: str) -> bool:
    return validate_unit(unit) in RELATIVE_UNITS


def format_number(value: float, decimals: int = _MAX_DECIMALS) -> str:
    """Format a number for CSS output.

    Ties round half-up. Never uses exponent notation and drops trailing zeros,
    so 16.0 -> "16", 0.8125 -> "0.8125", 0.30000000000000004 -> "0.3".
    """
    quantized = Decimal(repr(float(value))).quantize(
        Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP, context=_CONTEXT
    )
    text = f"{quantized:f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def with_unit(value: float, unit: str, decimals: int = _MAX_DECIMALS) -> str:
    return f"{format_number(value, decimals)}{unit}"
