"""Default values for type scale generation."""

import os
from pathlib import Path

# Style hierarchy, smallest first
DEFAULT_HIERARCHY = ("footnote", "caption", "p", "h6", "h5", "h4", "h3", "h2", "h1")

# Position in DEFAULT_HIERARCHY that maps to the base font size ("p")
DEFAULT_BASE_INDEX = 2

# Geometric progression: font size doubles every 5 scale steps from 16
DEFAULT_BASE = 16.0
DEFAULT_MULTIPLIER = 2.0
DEFAULT_STEPS = 5

# Font sizes are rounded up to the nearest quarter unit
DEFAULT_ROUND = 0.25
DEFAULT_ROUND_DIRECTION = "up"

# Baseline grid
DEFAULT_GRID_HEIGHT = 8.0
DEFAULT_LINE_HEIGHT_MULTIPLIER = 1.3

# Exponent of the default scale index curve
SCALE_INDEX_EXPONENT = 1.4

# Relative unit ratios keep at most this many decimals
RELATIVE_PRECISION = 4

ABSOLUTE_UNITS = ("cm", "mm", "Q", "in", "pc", "pt", "px")
RELATIVE_UNITS = ("em", "rem")

# CLI defaults. Override via GUDTYPE_OUTPUT / GUDTYPE_UNIT.
DEFAULT_OUTPUT = Path(os.getenv("GUDTYPE_OUTPUT", "typescale.css"))
DEFAULT_CLI_UNIT = os.getenv("GUDTYPE_UNIT", "rem")

CSS_HEADER = "/* Generated Gud TypeScale */"
