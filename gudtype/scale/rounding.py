"""Rounding to a target multiple."""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Literal

from ..errors import DomainError

RoundDirection = Literal["up", "down", "nearest"]

ROUND_DIRECTIONS: tuple[str, ...] = ("up", "down", "nearest")


def rounder(target_multiple: float, direction: RoundDirection | None = None) -> Callable[[float], float]:
    """Return a function that rounds numbers to a multiple of `target_multiple`.

    Args:
        target_multiple: The multiple to round to (must be nonzero)
        direction: "up", "down" or "nearest" (default when None)

    Returns:
        A one-argument rounding function

    Raises:
        DomainError: If target_multiple is zero
        ValueError: If direction is not recognized
    """
    if target_multiple == 0:
        raise DomainError("rounding target multiple must be nonzero")
    m = float(target_multiple)

    if direction == "up":
        return lambda num: math.ceil(num / m) * m
    if direction == "down":
        return lambda num: math.floor(num / m) * m
    if direction is None or direction == "nearest":
        # Half-up, not Python's round-half-even.
        return lambda num: math.floor(num / m + 0.5) * m
    raise ValueError(f"Unknown rounding direction {direction!r}; expected one of {', '.join(ROUND_DIRECTIONS)}")
