"""Type scale computation: curves, sizes, rounding and assembly."""

from .build import StyleEntry, TypeScaleOptions, resolve_options, scale_warnings, type_scale
from .index import (
    SCALE_INDEX_FUNCTIONS,
    fibonacci_scale_index,
    get_scale_index_function,
    linear_scale_index,
    scale_index,
)
from .rounding import ROUND_DIRECTIONS, rounder
from .sizes import font_size, line_height
from .units import UNITS, format_number, validate_unit, with_unit

__all__ = [
    "StyleEntry",
    "TypeScaleOptions",
    "resolve_options",
    "scale_warnings",
    "type_scale",
    "SCALE_INDEX_FUNCTIONS",
    "fibonacci_scale_index",
    "get_scale_index_function",
    "linear_scale_index",
    "scale_index",
    "ROUND_DIRECTIONS",
    "rounder",
    "font_size",
    "line_height",
    "UNITS",
    "format_number",
    "validate_unit",
    "with_unit",
]
