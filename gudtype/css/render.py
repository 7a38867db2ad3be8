"""Render a type scale as CSS or JSON."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from ..config import CSS_HEADER
from ..scale.build import StyleEntry
from ..scale.units import format_number


def _entries(type_scale: Mapping[str, Any]) -> list[tuple[str, StyleEntry]]:
    return [
        (name, entry if isinstance(entry, StyleEntry) else StyleEntry.model_validate(entry))
        for name, entry in type_scale.items()
    ]


def css_value(value: float | str) -> str:
    if isinstance(value, str):
        return value
    return format_number(value)


def root_block(entries: list[tuple[str, StyleEntry]]) -> str:
    lines = [":root {"]
    for name, entry in entries:
        lines.append(f"  --font-size-{name}: {css_value(entry.font_size)};")
        lines.append(f"  --line-height-{name}: {css_value(entry.line_height)};")
    lines.append("}")
    return "\n".join(lines)


def utility_classes(entries: list[tuple[str, StyleEntry]], prefix: str = "") -> str:
    lines = []
    for name, _ in entries:
        lines.append(f".{prefix}text-{name} {{")
        lines.append(f"  font-size: var(--font-size-{name});")
        lines.append(f"  line-height: var(--line-height-{name});")
        lines.append("}")
        lines.append(f".{prefix}leading-{name} {{")
        lines.append(f"  line-height: var(--line-height-{name});")
        lines.append("}")
    return "\n".join(lines)


def theme_block(entries: list[tuple[str, StyleEntry]]) -> str:
    """Tailwind v4 `@theme` variables; Tailwind derives the utilities itself."""
    lines = ["@theme {"]
    for name, entry in entries:
        font_size = css_value(entry.font_size)
        leading = css_value(entry.line_height)
        lines.append(f"  --text-{name}: {font_size};")
        lines.append(f"  --text-{name}--line-height: {leading};")
        lines.append(f"  --leading-{name}: {leading};")
    lines.append("}")
    return "\n".join(lines)


def type_scale_css(type_scale: Mapping[str, Any], prefix: str = "", tailwind: bool = False) -> str:
    """Render a type scale as CSS.

    Args:
        type_scale: Style name -> StyleEntry (or a mapping with font_size and
            line_height keys)
        prefix: Prefix for the utility class names
        tailwind: Emit a Tailwind `@theme` block instead of `:root` plus classes

    Returns:
        CSS text, styles in mapping order
    """
    entries = _entries(type_scale)
    parts = [CSS_HEADER]
    if tailwind:
        parts.append(theme_block(entries))
    else:
        parts.append(root_block(entries))
        if entries:
            parts.append(utility_classes(entries, prefix or ""))
    return "\n".join(parts) + "\n"


def type_scale_json(type_scale: Mapping[str, Any]) -> str:
    """Serialize a type scale for CSS-in-JS consumers, keeping style order."""
    payload = {name: entry.model_dump(mode="json") for name, entry in _entries(type_scale)}
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
