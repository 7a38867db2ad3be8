"""gudtype - geometric type scales rendered as CSS."""

__version__ = "0.1.0"

from .css.render import type_scale_css, type_scale_json
from .errors import DomainError, UnitError
from .scale import (
    StyleEntry,
    TypeScaleOptions,
    fibonacci_scale_index,
    font_size,
    line_height,
    linear_scale_index,
    rounder,
    scale_index,
    type_scale,
)

__all__ = [
    "__version__",
    "DomainError",
    "UnitError",
    "StyleEntry",
    "TypeScaleOptions",
    "fibonacci_scale_index",
    "font_size",
    "line_height",
    "linear_scale_index",
    "rounder",
    "scale_index",
    "type_scale",
    "type_scale_css",
    "type_scale_json",
]
