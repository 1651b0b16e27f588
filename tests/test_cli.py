"""Tests for the command line entry point."""

from __future__ import annotations

import io
import json
import unittest
from contextlib import redirect_stdout
from unittest import mock

from poisson_scatter.__main__ import build_parser, main


def _run(argv: list[str]) -> tuple[int, dict]:
    buf = io.StringIO()
    with redirect_stdout(buf):
        code = main(argv)
    return code, json.loads(buf.getvalue())


class TestCli(unittest.TestCase):

    def test_sample_prints_json(self):
        code, data = _run([
            "sample", "--width", "200", "--height", "150",
            "--size", "5", "--min-dist", "10", "--max-tries", "30",
            "--seed", "1", "--check",
        ])
        self.assertEqual(code, 0)
        self.assertGreater(len(data["samples"]), 0)
        self.assertEqual(data["bounds"], {"x": 0.0, "y": 0.0, "width": 200.0, "height": 150.0})
        for s in data["samples"]:
            self.assertEqual(set(s), {"x", "y", "radius", "size_index", "cell"})

    def test_seed_is_reproducible(self):
        argv = [
            "sample", "--width", "120", "--height", "120",
            "--size", "4", "--size", "8", "--circle",
            "--min-dist", "6", "--max-tries", "20", "--seed", "9",
        ]
        _, first = _run(argv)
        _, second = _run(argv)
        self.assertEqual(first, second)
        self.assertTrue(all(s["size_index"] in (0, 1) for s in first["samples"]))

    def test_too_small_exits_nonzero(self):
        with self.assertLogs("poisson_scatter.runner", level="ERROR"):
            code, data = _run([
                "sample", "--width", "0", "--height", "0", "--size", "10",
                "--min-dist", "20", "--max-tries", "30",
            ])
        self.assertEqual(code, 1)
        self.assertEqual(data["samples"], [])
        self.assertEqual(data["slots"], 0)

    def test_check_violations_exit_code(self):
        violation = "Samples 0 and 1 are closer than 10.0"
        with mock.patch("poisson_scatter.__main__.check_layout", return_value=[violation]) as check:
            with self.assertLogs("poisson_scatter.cli", level="ERROR") as logs:
                code, data = _run([
                    "sample", "--width", "200", "--height", "150",
                    "--size", "5", "--min-dist", "10", "--max-tries", "30",
                    "--seed", "1", "--check",
                ])
        self.assertEqual(code, 2)
        check.assert_called_once()
        self.assertGreater(len(data["samples"]), 0)
        self.assertTrue(any(violation in line for line in logs.output))

    def test_parser_requires_size(self):
        with self.assertRaises(SystemExit):
            build_parser().parse_args(["sample", "--width", "10", "--height", "10"])

    def test_parser_collects_sizes(self):
        args = build_parser().parse_args([
            "sample", "--width", "10", "--height", "10", "--size", "1", "--size", "2",
        ])
        self.assertEqual(args.size, [1.0, 2.0])
        self.assertIsNone(args.min_dist)
        self.assertFalse(args.circle)


if __name__ == "__main__":
    unittest.main()
