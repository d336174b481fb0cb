# SPDX-License-Identifier: MIT

import math
import unittest

from heatday.heatmap.capacity import (
    MIN_BUCKET_COUNT,
    ResizeDebouncer,
    fit_bucket_count,
    fit_cell_extent,
)
from heatday.heatmap.error import InvalidConfig


class TestFitBucketCount(unittest.TestCase):
    def test_rounds_down(self) -> None:
        # 119 usable columns over a minimum of 2 per cell
        self.assertEqual(fit_bucket_count(143, 24, 2, 4), 59)

    def test_never_below_minimum(self) -> None:
        self.assertEqual(fit_bucket_count(50, 24, 2, 4), MIN_BUCKET_COUNT)
        self.assertEqual(fit_bucket_count(10, 24, 2, 4), MIN_BUCKET_COUNT)

    def test_no_upper_clamp(self) -> None:
        self.assertEqual(fit_bucket_count(1024, 24, 2, 4), 500)

    def test_rejects_unusable_extents(self) -> None:
        with self.assertRaises(InvalidConfig):
            fit_bucket_count(math.inf, 24, 2, 4)
        with self.assertRaises(InvalidConfig):
            fit_bucket_count(100, math.nan, 2, 4)
        with self.assertRaises(InvalidConfig):
            fit_bucket_count(100, 24, 0, 4)
        with self.assertRaises(InvalidConfig):
            fit_bucket_count(100, 24, 4, 2)


class TestFitCellExtent(unittest.TestCase):
    def test_fills_usable_extent(self) -> None:
        self.assertEqual(fit_cell_extent(143, 24, 59, 2, 4), 2)
        self.assertEqual(fit_cell_extent(84, 24, 20, 2, 4), 3)

    def test_clamped_to_cell_bounds(self) -> None:
        self.assertEqual(fit_cell_extent(300, 24, 20, 2, 4), 4)
        self.assertEqual(fit_cell_extent(50, 24, 20, 2, 4), 2)

    def test_rejects_zero_buckets(self) -> None:
        with self.assertRaises(InvalidConfig):
            fit_cell_extent(143, 24, 0, 2, 4)


class TestResizeDebouncer(unittest.TestCase):
    def test_first_extent_is_reported_immediately(self) -> None:
        debouncer = ResizeDebouncer(100)

        self.assertEqual(debouncer.observe(120, 0.0), 120)
        self.assertEqual(debouncer.settled_extent, 120)
        self.assertIsNone(debouncer.observe(120, 0.01))

    def test_burst_settles_once(self) -> None:
        debouncer = ResizeDebouncer(100)
        debouncer.observe(100, 0.0)

        self.assertIsNone(debouncer.observe(120, 0.02))
        self.assertIsNone(debouncer.observe(130, 0.05))
        self.assertIsNone(debouncer.observe(130, 0.14))
        self.assertEqual(debouncer.observe(130, 0.16), 130)
        self.assertIsNone(debouncer.observe(130, 0.3))
        self.assertEqual(debouncer.settled_extent, 130)

    def test_resizing_back_cancels_pending_change(self) -> None:
        debouncer = ResizeDebouncer(100)
        debouncer.observe(100, 0.0)

        self.assertIsNone(debouncer.observe(120, 0.01))
        self.assertIsNone(debouncer.observe(100, 0.02))
        self.assertIsNone(debouncer.observe(100, 0.5))
        self.assertEqual(debouncer.settled_extent, 100)

    def test_zero_delay_reports_every_change(self) -> None:
        debouncer = ResizeDebouncer(0)
        debouncer.observe(100, 0.0)

        self.assertEqual(debouncer.observe(120, 0.0), 120)

    def test_rejects_negative_delay(self) -> None:
        with self.assertRaises(InvalidConfig):
            ResizeDebouncer(-1)


if __name__ == "__main__":
    unittest.main(verbosity=2)
