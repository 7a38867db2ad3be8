"""CSS output for type scales."""

from .render import type_scale_css, type_scale_json

__all__ = ["type_scale_css", "type_scale_json"]
