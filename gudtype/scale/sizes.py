"""Font size and line height calculation."""

from __future__ import annotations

from collections.abc import Callable

from ..config import (
    DEFAULT_BASE,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_LINE_HEIGHT_MULTIPLIER,
    DEFAULT_MULTIPLIER,
    DEFAULT_ROUND,
    DEFAULT_ROUND_DIRECTION,
    DEFAULT_STEPS,
)
from ..errors import DomainError
from .rounding import rounder


def font_size(
    scale_index: float,
    base: float = DEFAULT_BASE,
    multiplier: float = DEFAULT_MULTIPLIER,
    steps: float = DEFAULT_STEPS,
    rounding: Callable[[float], float] | None = None,
) -> float:
    """Font size at a scale index.

    Every `steps` increments of the scale index multiply the size by
    `multiplier`: round(base * multiplier ** (scale_index / steps)).

    Args:
        scale_index: Output of a scale index curve
        base: Font size at scale index 0
        multiplier: Growth per `steps` increments
        steps: Scale index increments per multiple (nonzero)
        rounding: Rounding function, defaults to rounding up to 0.25

    Returns:
        Rounded font size

    Raises:
        DomainError: If steps is zero
    """
    if steps == 0:
        raise DomainError("steps must be nonzero")
    if rounding is None:
        rounding = rounder(DEFAULT_ROUND, DEFAULT_ROUND_DIRECTION)
    return rounding(base * multiplier ** (scale_index / steps))


def line_height(
    font_size: float,
    multiplier: float = DEFAULT_LINE_HEIGHT_MULTIPLIER,
    grid_height: float = DEFAULT_GRID_HEIGHT,
) -> float:
    """Line height for a font size, rounded up onto the baseline grid.

    The direction is always up so a line is never shorter than
    `font_size * multiplier`.

    Raises:
        DomainError: If grid_height is not positive
    """
    if grid_height <= 0:
        raise DomainError("grid height must be > 0")
    return rounder(grid_height, "up")(font_size * multiplier)
