"""Assemble a full type scale from a style hierarchy."""

from __future__ import annotations

import warnings
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, Field

from ..config import (
    DEFAULT_BASE,
    DEFAULT_BASE_INDEX,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_HIERARCHY,
    DEFAULT_LINE_HEIGHT_MULTIPLIER,
    DEFAULT_MULTIPLIER,
    DEFAULT_ROUND,
    DEFAULT_ROUND_DIRECTION,
    DEFAULT_STEPS,
    RELATIVE_PRECISION,
)
from ..errors import DomainError
from .index import scale_index
from .rounding import rounder
from .sizes import font_size, line_height
from .units import Unit, is_relative, with_unit


class TypeScaleOptions(BaseModel):
    """Every tunable of a type scale, with defaults."""

    model_config = {"frozen": True}

    hierarchy: list[str] = Field(default_factory=lambda: list(DEFAULT_HIERARCHY))
    # Hierarchy position that maps to scale index 0. May lie outside the
    # hierarchy, which shifts every style's offset.
    base_index: int = DEFAULT_BASE_INDEX
    get_scale_index: Callable[[float], float] = scale_index
    base: float = Field(default=DEFAULT_BASE, gt=0)
    multiplier: float = Field(default=DEFAULT_MULTIPLIER, gt=0)
    steps: float = DEFAULT_STEPS
    rounding: Callable[[float], float] = Field(
        default_factory=lambda: rounder(DEFAULT_ROUND, DEFAULT_ROUND_DIRECTION)
    )
    grid_height: float = DEFAULT_GRID_HEIGHT
    line_height_multiplier: float = DEFAULT_LINE_HEIGHT_MULTIPLIER
    unit: Unit | None = None


class StyleEntry(BaseModel):
    """Font size and line height of one style.

    Both values are floats when no unit was requested and unit-suffixed
    strings ("24px", "1.5rem") otherwise.
    """

    model_config = {"frozen": True}

    font_size: float | str
    line_height: float | str


def resolve_options(options: TypeScaleOptions | None = None, **overrides: Any) -> TypeScaleOptions:
    """Merge keyword overrides over `options` (or the defaults) and validate."""
    if options is None:
        return TypeScaleOptions(**overrides)
    if not overrides:
        return options
    return TypeScaleOptions(**{**dict(options), **overrides})


def scale_warnings(options: TypeScaleOptions) -> list[str]:
    """Advisory messages for options that are legal but probably unintended."""
    found: list[str] = []
    count = len(options.hierarchy)
    if not 0 <= options.base_index < count:
        found.append(
            f"Base index {options.base_index} is outside the hierarchy (0..{count - 1}); "
            "no style will use the base font size"
        )
    seen: set[str] = set()
    for name in options.hierarchy:
        if name in seen:
            found.append(f"Duplicate style {name!r}; the later entry overwrites the earlier one")
        seen.add(name)
    if options.multiplier <= 1:
        found.append(f"Multiplier {options.multiplier:g} does not grow font sizes up the hierarchy")
    return found


def type_scale(
    options: TypeScaleOptions | None = None,
    *,
    warn: bool = False,
    **overrides: Any,
) -> dict[str, StyleEntry]:
    """Generate font sizes and line heights for a hierarchy of styles.

    Args:
        options: Base options, defaults when None
        warn: Emit `scale_warnings` through the warnings module
        **overrides: TypeScaleOptions fields overriding `options`

    Returns:
        Style name -> StyleEntry, in hierarchy order

    Raises:
        pydantic.ValidationError: For invalid options (e.g. unknown unit)
        DomainError: For zero steps, a non-positive grid height, or a zero
            base line height with a relative unit
    """
    opts = resolve_options(options, **overrides)
    if opts.steps == 0:
        raise DomainError("steps must be nonzero")
    if opts.grid_height <= 0:
        raise DomainError("grid height must be > 0")
    if warn:
        for message in scale_warnings(opts):
            warnings.warn(message, stacklevel=2)

    def _sizes(offset: int) -> tuple[float, float]:
        size = font_size(
            opts.get_scale_index(offset),
            base=opts.base,
            multiplier=opts.multiplier,
            steps=opts.steps,
            rounding=opts.rounding,
        )
        return size, line_height(size, multiplier=opts.line_height_multiplier, grid_height=opts.grid_height)

    unit = opts.unit
    relative = unit is not None and is_relative(unit)
    base_line_height = 0.0
    if relative:
        _, base_line_height = _sizes(0)
        if base_line_height == 0:
            raise DomainError("base line height is zero; relative line heights are undefined")

    result: dict[str, StyleEntry] = {}
    for i, name in enumerate(opts.hierarchy):
        size, leading = _sizes(i - opts.base_index)
        if unit is None:
            entry = StyleEntry(font_size=size, line_height=leading)
        elif relative:
            entry = StyleEntry(
                font_size=with_unit(size / opts.base, unit, RELATIVE_PRECISION),
                line_height=with_unit(leading / base_line_height, unit, RELATIVE_PRECISION),
            )
        else:
            entry = StyleEntry(font_size=with_unit(size, unit), line_height=with_unit(leading, unit))
        result[name] = entry
    return result
