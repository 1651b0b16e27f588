"""Tests for option validation and the sampler runner.

Validates:
  - Missing/invalid bounds and images abort with an error diagnostic
  - Missing optional values warn and fall back to defaults
  - Invalid optional values error and fall back to defaults
  - camelCase and snake_case option dicts are both understood
  - The runner returns diagnostics and logs them
  - Bounds too small for one item yield an empty result plus an error
"""

from __future__ import annotations

import unittest

from poisson_scatter.config import SAMPLER_DEFAULTS
from poisson_scatter.options import (
    SamplerOptions, validate_options, parse_options,
    has_valid_bounds, has_valid_image_list, has_valid_min_dist, has_valid_max_tries,
    BOUNDS_ERROR, IMAGES_ERROR,
)
from poisson_scatter.runner import TOO_SMALL_ERROR, poisson_image_sampler
from poisson_scatter.sampler import Bounds, ImageSize, check_layout
from tests.scatter_fixture import icon_options, seeded_rng


class TestPredicates(unittest.TestCase):

    def test_bounds_missing_fields(self):
        for missing in ("x", "y", "width", "height"):
            bounds = {"x": 0, "y": 0, "width": 0, "height": 0}
            del bounds[missing]
            self.assertFalse(has_valid_bounds(bounds), missing)

    def test_bounds_non_numeric_fields(self):
        for bad in ("x", "y", "width", "height"):
            bounds = {"x": 0, "y": 0, "width": 0, "height": 0}
            bounds[bad] = "a"
            self.assertFalse(has_valid_bounds(bounds), bad)

    def test_bounds_valid(self):
        self.assertTrue(has_valid_bounds({"x": 0, "y": 0, "width": 0, "height": 0}))
        self.assertTrue(has_valid_bounds(Bounds(0, 0, 10, 10)))
        self.assertFalse(has_valid_bounds(None))
        self.assertFalse(has_valid_bounds({"x": True, "y": 0, "width": 1, "height": 1}))

    def test_image_list(self):
        self.assertTrue(has_valid_image_list([{"size": 5}, ImageSize(size=10)]))
        self.assertFalse(has_valid_image_list([]))
        self.assertFalse(has_valid_image_list(None))
        self.assertFalse(has_valid_image_list({"size": 5}))
        self.assertFalse(has_valid_image_list([{"size": 5}, {"size": "a"}]))
        self.assertFalse(has_valid_image_list([{"size": 0}]))
        self.assertFalse(has_valid_image_list([{}]))

    def test_min_dist_and_max_tries(self):
        self.assertTrue(has_valid_min_dist(0))
        self.assertFalse(has_valid_min_dist(None))
        self.assertFalse(has_valid_min_dist("a"))
        self.assertTrue(has_valid_max_tries(0))
        self.assertFalse(has_valid_max_tries(None))
        self.assertFalse(has_valid_max_tries("a"))


class TestValidateOptions(unittest.TestCase):

    def _messages(self, result, level):
        return [d.message for d in result.diagnostics if d.level == level]

    def test_missing_options(self):
        result = validate_options(None)
        self.assertFalse(result.ok)
        self.assertEqual(self._messages(result, "error"), [BOUNDS_ERROR])

    def test_invalid_bounds(self):
        result = validate_options({"bounds": {"x": 0, "y": 0}, "images": [{"size": 5}]})
        self.assertIsNone(result.options)
        self.assertEqual(self._messages(result, "error"), [BOUNDS_ERROR])

    def test_invalid_images(self):
        result = validate_options({"bounds": {"x": 0, "y": 0, "width": 10, "height": 10}})
        self.assertIsNone(result.options)
        self.assertEqual(self._messages(result, "error"), [IMAGES_ERROR])

    def test_full_options_no_diagnostics(self):
        result = validate_options(icon_options())
        self.assertTrue(result.ok)
        self.assertEqual(result.diagnostics, [])
        self.assertEqual(result.options.bounds, Bounds(0, 0, 500, 500))
        self.assertEqual(result.options.sizes, [5.0])
        self.assertEqual(result.options.min_dist, 20)
        self.assertEqual(result.options.max_tries, 30)
        self.assertFalse(result.options.is_circle)

    def test_missing_min_dist_warns(self):
        opts = icon_options()
        del opts["minDist"]
        result = validate_options(opts)
        self.assertEqual(
            self._messages(result, "warning"),
            [f"The options.minDist is not set. Falling back to default of {SAMPLER_DEFAULTS.min_dist}"],
        )
        self.assertEqual(result.options.min_dist, SAMPLER_DEFAULTS.min_dist)

    def test_missing_max_tries_warns(self):
        opts = icon_options()
        del opts["maxTries"]
        result = validate_options(opts)
        self.assertEqual(
            self._messages(result, "warning"),
            ["The options.maxTries is not set. Falling back to default of 30"],
        )
        self.assertEqual(result.options.max_tries, 30)

    def test_invalid_min_dist_errors(self):
        opts = icon_options()
        opts["minDist"] = "a"
        result = validate_options(opts)
        self.assertEqual(
            self._messages(result, "error"),
            ["The given minDist value is not a valid number. Falling back to default of 20"],
        )
        self.assertEqual(result.options.min_dist, 20)

    def test_invalid_max_tries_errors(self):
        opts = icon_options()
        opts["maxTries"] = "a"
        result = validate_options(opts)
        self.assertEqual(
            self._messages(result, "error"),
            ["The given maxTries value is not a valid number. Falling back to default of 30"],
        )

    def test_out_of_range_values_error(self):
        opts = icon_options()
        opts["minDist"] = -3
        opts["maxTries"] = -2
        result = validate_options(opts)
        self.assertEqual(len(self._messages(result, "error")), 2)
        self.assertEqual(result.options.min_dist, 20)
        self.assertEqual(result.options.max_tries, 30)

    def test_zero_min_dist_warns_but_is_kept(self):
        """0 counts as not set, yet a usable number stays in effect."""
        opts = icon_options()
        opts["minDist"] = 0
        result = validate_options(opts)
        self.assertEqual([d.level for d in result.diagnostics], ["warning"])
        self.assertEqual(
            self._messages(result, "warning"),
            ["The options.minDist is not set. Falling back to default of 20"],
        )
        self.assertEqual(result.options.min_dist, 0)

    def test_empty_min_dist_warns_and_defaults(self):
        opts = icon_options()
        opts["minDist"] = ""
        result = validate_options(opts)
        self.assertEqual([d.level for d in result.diagnostics], ["warning"])
        self.assertEqual(result.options.min_dist, 20)

    def test_falsy_max_tries_warns_and_defaults(self):
        for value in (0, "", False):
            opts = icon_options()
            opts["maxTries"] = value
            result = validate_options(opts)
            self.assertEqual(
                self._messages(result, "warning"),
                ["The options.maxTries is not set. Falling back to default of 30"],
                repr(value),
            )
            self.assertEqual(self._messages(result, "error"), [], repr(value))
            self.assertEqual(result.options.max_tries, 30)

    def test_non_mapping_options_report_bounds_error(self):
        for value in ("x", 42, object()):
            result = validate_options(value)
            self.assertIsNone(result.options)
            self.assertEqual(self._messages(result, "error"), [BOUNDS_ERROR])

    def test_fractional_max_tries_rounds_up(self):
        opts = icon_options()
        opts["maxTries"] = 2.5
        self.assertEqual(validate_options(opts).options.max_tries, 3)

    def test_snake_case_keys(self):
        parsed = parse_options({
            "bounds": {"x": 1, "y": 2, "width": 3, "height": 4},
            "images": [{"size": 1}],
            "min_dist": 7,
            "max_tries": 9,
            "is_circle": True,
        })
        self.assertEqual(parsed.min_dist, 7)
        self.assertEqual(parsed.max_tries, 9)
        self.assertTrue(parsed.is_circle)

    def test_dataclass_options(self):
        result = validate_options(SamplerOptions(
            bounds=Bounds(0, 0, 100, 100),
            images=[ImageSize(size=3)],
            min_dist=4, max_tries=5, is_circle=True,
        ))
        self.assertTrue(result.ok)
        self.assertTrue(result.options.is_circle)
        self.assertEqual(result.options.images, [ImageSize(size=3)])


class TestRunner(unittest.TestCase):

    def test_samples_icon_board(self):
        outcome = poisson_image_sampler(icon_options(), rng=seeded_rng(4))
        self.assertEqual(outcome.diagnostics, [])
        placed = [s for s in outcome.result if s is not None]
        self.assertGreater(len(placed), 0)
        self.assertEqual(check_layout(outcome.result, Bounds(0, 0, 500, 500), 20), [])

    def test_zero_bounds_reports_too_small(self):
        opts = icon_options()
        opts["bounds"] = {"x": 0, "y": 0, "width": 0, "height": 0}
        opts["images"] = [{"size": 10}]
        with self.assertLogs("poisson_scatter.runner", level="ERROR") as cm:
            outcome = poisson_image_sampler(opts, rng=seeded_rng())
        self.assertEqual(outcome.result, [])
        self.assertEqual(outcome.errors, [TOO_SMALL_ERROR])
        self.assertTrue(any(TOO_SMALL_ERROR in line for line in cm.output))

    def test_invalid_bounds_empty(self):
        with self.assertLogs("poisson_scatter.runner", level="ERROR") as cm:
            outcome = poisson_image_sampler({"bounds": {"x": 0, "y": 0}})
        self.assertEqual(outcome.result, [])
        self.assertIsNone(outcome.options)
        self.assertEqual(outcome.errors, [BOUNDS_ERROR])
        self.assertEqual(len(cm.output), 1)

    def test_unusable_options_object_empty(self):
        with self.assertLogs("poisson_scatter.runner", level="ERROR"):
            outcome = poisson_image_sampler("x")
        self.assertEqual(outcome.result, [])
        self.assertEqual(outcome.errors, [BOUNDS_ERROR])

    def test_missing_values_logged_as_warnings(self):
        opts = icon_options()
        del opts["minDist"]
        del opts["maxTries"]
        with self.assertLogs("poisson_scatter.runner", level="WARNING") as cm:
            outcome = poisson_image_sampler(opts, rng=seeded_rng(2), max_iterations=50)
        self.assertEqual(len(outcome.warnings), 2)
        self.assertEqual(
            sum(1 for line in cm.output if line.startswith("WARNING:")), 2,
        )
        self.assertEqual(outcome.options.min_dist, 20)


if __name__ == "__main__":
    unittest.main()
