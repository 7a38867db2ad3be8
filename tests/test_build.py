"""Tests for type scale assembly."""

from __future__ import annotations

import re
import unittest

from pydantic import ValidationError

from gudtype.errors import DomainError
from gudtype.scale.build import StyleEntry, TypeScaleOptions, scale_warnings, type_scale
from gudtype.scale.index import fibonacci_scale_index, linear_scale_index
from gudtype.scale.rounding import rounder

HIERARCHY = ["footnote", "caption", "p", "h6", "h5", "h4", "h3", "h2", "h1"]


class TestTypeScaleDefaults(unittest.TestCase):
    def test_one_entry_per_style_in_order(self) -> None:
        scale = type_scale()
        self.assertEqual(list(scale), HIERARCHY)
        self.assertTrue(all(isinstance(e, StyleEntry) for e in scale.values()))

    def test_base_style(self) -> None:
        p = type_scale()["p"]
        self.assertEqual(p.font_size, 16)
        self.assertEqual(p.line_height, 24)

    def test_known_values(self) -> None:
        scale = type_scale()
        self.assertEqual((scale["footnote"].font_size, scale["footnote"].line_height), (11.25, 16))
        self.assertEqual((scale["caption"].font_size, scale["caption"].line_height), (14, 24))
        self.assertEqual((scale["h6"].font_size, scale["h6"].line_height), (18.5, 32))

    def test_sizes_increase_up_the_hierarchy(self) -> None:
        sizes = [e.font_size for e in type_scale().values()]
        self.assertEqual(sizes, sorted(sizes))
        self.assertEqual(len(set(sizes)), len(sizes))

    def test_deterministic(self) -> None:
        self.assertEqual(type_scale(unit="rem"), type_scale(unit="rem"))
        self.assertEqual(type_scale(), type_scale())


class TestTypeScaleOptions(unittest.TestCase):
    def test_custom_hierarchy(self) -> None:
        scale = type_scale(hierarchy=["zero", "one", "two"], base_index=0)
        self.assertEqual(list(scale), ["zero", "one", "two"])
        self.assertEqual(scale["zero"].font_size, 16)

    def test_pluggable_curve(self) -> None:
        linear = type_scale(get_scale_index=linear_scale_index)
        # offset 2: 16 * 2 ** 0.4 = 21.11...
        self.assertEqual(linear["h5"].font_size, 21.25)
        fib = type_scale(hierarchy=["a", "b", "c", "d"], base_index=0, get_scale_index=fibonacci_scale_index)
        # fibonacci(3) == 2, same step as the linear curve at offset 2
        self.assertEqual(fib["d"].font_size, 21.25)
        self.assertEqual(fib["b"].font_size, fib["c"].font_size)

    def test_custom_rounding(self) -> None:
        scale = type_scale(rounding=rounder(1, "down"))
        self.assertEqual(scale["h6"].font_size, 18)

    def test_overrides_merge_over_options(self) -> None:
        options = TypeScaleOptions(base=20, unit="px")
        scale = type_scale(options, hierarchy=["body"], base_index=0)
        self.assertEqual(scale["body"].font_size, "20px")
        self.assertEqual(scale["body"].line_height, "32px")

    def test_base_index_outside_hierarchy_extrapolates(self) -> None:
        scale = type_scale(hierarchy=["h2", "h1"], base_index=-1)
        self.assertEqual(scale["h2"].font_size, 18.5)
        below = type_scale(hierarchy=["a", "b"], base_index=5)
        self.assertLess(below["b"].font_size, 16)

    def test_duplicate_names_overwrite(self) -> None:
        scale = type_scale(hierarchy=["a", "b", "a"], base_index=0)
        self.assertEqual(list(scale), ["a", "b"])
        self.assertGreater(scale["a"].font_size, scale["b"].font_size)

    def test_zero_steps_raises(self) -> None:
        with self.assertRaises(DomainError):
            type_scale(steps=0)

    def test_zero_grid_height_raises(self) -> None:
        with self.assertRaises(DomainError):
            type_scale(grid_height=0)

    def test_degenerate_divisors_fail_with_empty_hierarchy(self) -> None:
        with self.assertRaises(DomainError):
            type_scale(hierarchy=[], steps=0)
        with self.assertRaises(DomainError):
            type_scale(hierarchy=[], grid_height=0)

    def test_non_positive_multiplier_rejected_by_options(self) -> None:
        with self.assertRaises(ValidationError):
            TypeScaleOptions(multiplier=0)
        with self.assertRaises(ValidationError):
            type_scale(multiplier=-2)

    def test_unknown_unit_rejected_by_options(self) -> None:
        with self.assertRaises(ValidationError):
            TypeScaleOptions(unit="vw")
        with self.assertRaises(ValidationError):
            type_scale(unit="%")


class TestUnits(unittest.TestCase):
    def test_absolute_units_use_raw_values(self) -> None:
        scale = type_scale(unit="px")
        self.assertEqual(scale["p"].font_size, "16px")
        self.assertEqual(scale["p"].line_height, "24px")
        self.assertEqual(scale["h6"].font_size, "18.5px")
        for entry in scale.values():
            self.assertRegex(entry.font_size, r"^\d+(\.\d+)?px$")
            self.assertRegex(entry.line_height, r"^\d+(\.\d+)?px$")

    def test_other_absolute_units(self) -> None:
        self.assertEqual(type_scale(unit="pt")["p"].font_size, "16pt")
        self.assertEqual(type_scale(unit="Q")["caption"].line_height, "24Q")

    def test_relative_units_are_ratios(self) -> None:
        scale = type_scale(unit="rem")
        self.assertEqual(scale["p"].font_size, "1rem")
        self.assertEqual(scale["p"].line_height, "1rem")
        self.assertEqual(scale["caption"].font_size, "0.875rem")
        # 18.5 / 16 = 1.15625 sits on a four-decimal tie
        self.assertEqual(scale["h6"].font_size, "1.1563rem")
        # footnote line height 16 against the base line height 24
        self.assertEqual(scale["footnote"].line_height, "0.6667rem")

    def test_relative_round_trip(self) -> None:
        plain = type_scale()
        relative = type_scale(unit="em")
        for name, entry in relative.items():
            match = re.fullmatch(r"(\d+(?:\.\d{1,4})?)em", entry.font_size)
            self.assertIsNotNone(match)
            self.assertAlmostEqual(float(match.group(1)) * 16, plain[name].font_size, delta=0.01)


class TestScaleWarnings(unittest.TestCase):
    def test_clean_defaults(self) -> None:
        self.assertEqual(scale_warnings(TypeScaleOptions()), [])

    def test_reports_questionable_options(self) -> None:
        found = scale_warnings(TypeScaleOptions(hierarchy=["a", "a"], base_index=4, multiplier=1))
        self.assertEqual(len(found), 3)
        self.assertIn("outside the hierarchy", found[0])
        self.assertIn("Duplicate style 'a'", found[1])

    def test_warn_flag_emits_warnings(self) -> None:
        with self.assertWarns(UserWarning):
            type_scale(hierarchy=["a"], base_index=3, warn=True)


if __name__ == "__main__":
    unittest.main()
