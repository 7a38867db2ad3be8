"""Curves mapping a hierarchy offset to a scale index.

The offset is a style's position in the hierarchy minus the base index. The
resulting scale index is the exponent step fed into the font size formula, so
the curve decides how quickly sizes grow away from the base style.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from ..config import SCALE_INDEX_EXPONENT

ScaleIndexFn = Callable[[float], float]


def scale_index(offset: float) -> float:
    """Default curve: sign(offset) * |offset| ** 1.4."""
    if offset == 0:
        return 0.0
    return math.copysign(abs(offset) ** SCALE_INDEX_EXPONENT, offset)


def linear_scale_index(offset: float) -> float:
    return float(offset)


def fibonacci_scale_index(offset: float) -> float:
    """Signed Fibonacci number at |offset| (0, 1, 1, 2, 3, 5, 8, ...).

    Non-integer offsets round away from zero (2.5 -> fibonacci(3)).
    """
    n = math.ceil(abs(offset))
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return float(-current if offset < 0 else current)


SCALE_INDEX_FUNCTIONS: dict[str, ScaleIndexFn] = {
    "power": scale_index,
    "fibonacci": fibonacci_scale_index,
    "linear": linear_scale_index,
}


def get_scale_index_function(name: str) -> ScaleIndexFn:
    try:
        return SCALE_INDEX_FUNCTIONS[name]
    except KeyError:
        raise ValueError(
            f"Unknown scale index curve {name!r}; expected one of {', '.join(SCALE_INDEX_FUNCTIONS)}"
        ) from None
