"""CLI entry point for gudtype.

`-h` is taken by `--hierarchy`, so help is only available as `--help`.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import (
    DEFAULT_BASE,
    DEFAULT_BASE_INDEX,
    DEFAULT_CLI_UNIT,
    DEFAULT_GRID_HEIGHT,
    DEFAULT_HIERARCHY,
    DEFAULT_LINE_HEIGHT_MULTIPLIER,
    DEFAULT_MULTIPLIER,
    DEFAULT_OUTPUT,
    DEFAULT_ROUND,
    DEFAULT_ROUND_DIRECTION,
    DEFAULT_STEPS,
)

_NO_UNIT = "none"


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def build_parser() -> argparse.ArgumentParser:
    from .scale import ROUND_DIRECTIONS, SCALE_INDEX_FUNCTIONS, UNITS

    parser = argparse.ArgumentParser(
        prog="gudtype",
        description="Generate a CSS type scale based on a hierarchy of font styles.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="Show this message and exit")
    parser.add_argument("--version", "-v", action="version", version=f"gudtype {__version__}")

    parser.add_argument(
        "--hierarchy",
        "-h",
        nargs="+",
        default=list(DEFAULT_HIERARCHY),
        metavar="STYLE",
        help="Hierarchy of font styles, smallest first",
    )
    parser.add_argument("--base", "-b", type=float, default=DEFAULT_BASE, help="Base font size")
    parser.add_argument(
        "--base-index",
        "-i",
        type=int,
        default=DEFAULT_BASE_INDEX,
        help="Index of the base font size in the hierarchy",
    )
    parser.add_argument("--multiplier", "-m", type=float, default=DEFAULT_MULTIPLIER, help="Increment multiplier")
    parser.add_argument("--steps", "-s", type=float, default=DEFAULT_STEPS, help="Steps between multiples")
    parser.add_argument("--round", "-r", type=float, default=DEFAULT_ROUND, help="Font size rounding factor")
    parser.add_argument(
        "--round-direction",
        "-d",
        choices=ROUND_DIRECTIONS,
        default=DEFAULT_ROUND_DIRECTION,
        help="Rounding direction",
    )
    parser.add_argument(
        "--grid-height", "-g", type=float, default=DEFAULT_GRID_HEIGHT, help="Line height grid size"
    )
    parser.add_argument(
        "--line-height-multiplier",
        "-l",
        type=float,
        default=DEFAULT_LINE_HEIGHT_MULTIPLIER,
        help="Line height multiplier",
    )
    parser.add_argument(
        "--unit",
        "-u",
        choices=(*UNITS, _NO_UNIT),
        default=DEFAULT_CLI_UNIT,
        help="CSS unit to append to font sizes and line heights",
    )
    parser.add_argument(
        "--scale-index",
        "-x",
        choices=tuple(SCALE_INDEX_FUNCTIONS),
        default="power",
        help="Curve mapping hierarchy positions to scale indexes",
    )
    parser.add_argument("--prefix", "-p", default="", help="Prefix for utility classes")
    parser.add_argument("--tailwind", "-t", action="store_true", help="Emit a Tailwind @theme block")
    parser.add_argument("--format", "-f", choices=("css", "json"), default="css", help="Output format")
    parser.add_argument("--output", "-o", type=Path, default=DEFAULT_OUTPUT, help="Output file path")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return _cmd_generate(args)


def _cmd_generate(args: Any) -> int:
    from .css.render import type_scale_css, type_scale_json
    from .scale import TypeScaleOptions, get_scale_index_function, rounder, scale_warnings, type_scale

    try:
        options = TypeScaleOptions(
            hierarchy=args.hierarchy,
            base_index=args.base_index,
            get_scale_index=get_scale_index_function(args.scale_index),
            base=args.base,
            multiplier=args.multiplier,
            steps=args.steps,
            rounding=rounder(args.round, args.round_direction),
            grid_height=args.grid_height,
            line_height_multiplier=args.line_height_multiplier,
            unit=None if args.unit == _NO_UNIT else args.unit,
        )
        scale = type_scale(options)
        if args.format == "json":
            text = type_scale_json(scale)
        else:
            text = type_scale_css(scale, prefix=args.prefix, tailwind=bool(args.tailwind))
        output = Path(args.output)
        output.write_text(text, encoding="utf-8")
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"✓ Type scale written: {output}")
    print(f"  Styles: {len(scale)}")
    print(f"  Unit: {options.unit or 'none'}")

    warnings = scale_warnings(options)
    if warnings:
        print(f"\nWarnings ({len(warnings)}):")
        for w in warnings[:10]:
            print(f"  - {w}")
        if len(warnings) > 10:
            print(f"  ... and {len(warnings) - 10} more")
    return 0


if __name__ == "__main__":
    app()
