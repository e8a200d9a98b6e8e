"""Tests for the console demo helpers and end-to-end run."""

import sys
import os
import io
import unittest
from contextlib import redirect_stdout

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import bst_demo
from bst_demo import format_traversal, main, progress_bar, run_demo


class TestProgressBar(unittest.TestCase):

    def test_partial_progress(self):
        self.assertEqual(progress_bar(1, 4), "[=====               ]  25%")

    def test_complete_progress(self):
        self.assertEqual(progress_bar(15, 15), "[" + "=" * 20 + "] 100%")

    def test_custom_width(self):
        self.assertEqual(progress_bar(1, 2, width=4), "[==  ]  50%")

    def test_non_positive_total_raises(self):
        with self.assertRaises(ValueError):
            progress_bar(0, 0)


class TestFormatTraversal(unittest.TestCase):

    def test_arrow_separated(self):
        self.assertEqual(format_traversal([10, 20, 30]), "10 -> 20 -> 30")

    def test_single_and_empty(self):
        self.assertEqual(format_traversal([5]), "5")
        self.assertEqual(format_traversal([]), "")


class TestRunDemo(unittest.TestCase):

    def setUp(self):
        self.out = io.StringIO()
        with redirect_stdout(self.out):
            self.results = run_demo()

    def test_structure(self):
        self.assertEqual(self.results["count"], 15)
        self.assertEqual(self.results["height"], 4)
        self.assertAlmostEqual(self.results["balance_factor"], 3.75)

    def test_traversals(self):
        self.assertEqual(self.results["in_order"], sorted(bst_demo.DATASET))
        self.assertEqual(self.results["pre_order"][0], 50)
        self.assertEqual(self.results["post_order"][-1], 50)

    def test_searches(self):
        self.assertEqual(
            self.results["searches"],
            {25: True, 75: True, 100: False, 1: False, 50: True},
        )

    def test_statistics(self):
        stats = self.results["statistics"]
        self.assertEqual(stats["sum"], 745)
        self.assertAlmostEqual(stats["mean"], 745 / 15)
        self.assertAlmostEqual(stats["median"], 50.0)

    def test_release(self):
        self.assertEqual(self.results["released"], 15)

    def test_output_mentions_every_phase(self):
        text = self.out.getvalue()
        for phase in range(1, 7):
            self.assertIn(f"Phase {phase}:", text)
        self.assertIn("Tree Balance Factor: 3.75", text)
        self.assertIn("Search for value 100: NOT FOUND", text)
        self.assertIn("Mean Value: 49.67", text)

    def test_main_returns_zero(self):
        with redirect_stdout(io.StringIO()):
            self.assertEqual(main(), 0)


if __name__ == "__main__":
    unittest.main()
