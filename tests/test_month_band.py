# SPDX-License-Identifier: MIT

import unittest

import pendulum

from heatday.heatmap.bucket import generate_buckets
from heatday.heatmap.error import InvalidConfig
from heatday.heatmap.month_band import (
    find_month_candidates,
    layout_month_bands,
    select_month_bands,
)
from heatday.model.heatmap import MonthCandidate


def candidate(year: int, month: int, bucket_index: int) -> MonthCandidate:
    return {"month_start": pendulum.date(year, month, 1), "bucket_index": bucket_index}


class TestFindMonthCandidates(unittest.TestCase):
    def test_adds_leading_month_when_first_bucket_has_no_first_day(self) -> None:
        buckets = generate_buckets(pendulum.datetime(2026, 10, 19, tz="UTC"), 1, 30)

        candidates = find_month_candidates(buckets, 1)

        self.assertEqual(
            [(c["month_start"].to_date_string(), c["bucket_index"]) for c in candidates],
            [("2026-10-01", 0), ("2026-11-01", 20)],
        )

    def test_no_leading_month_when_window_starts_on_first(self) -> None:
        buckets = generate_buckets(pendulum.datetime(2026, 11, 8, tz="UTC"), 1, 20)

        candidates = find_month_candidates(buckets, 1)

        self.assertEqual(len(candidates), 1)
        self.assertEqual(candidates[0]["bucket_index"], 0)
        self.assertEqual(candidates[0]["month_start"], pendulum.date(2026, 11, 1))

    def test_wide_bucket_containing_first_day(self) -> None:
        # Second bucket covers 2026-10-31 to 2026-11-06
        buckets = generate_buckets(pendulum.datetime(2026, 10, 31, tz="UTC"), 7, 20)

        candidates = find_month_candidates(buckets, 7)

        self.assertEqual(candidates[1]["bucket_index"], 1)
        self.assertEqual(candidates[1]["month_start"], pendulum.date(2026, 11, 1))

    def test_empty_buckets(self) -> None:
        self.assertEqual(find_month_candidates([], 1), [])
        self.assertEqual(layout_month_bands([], 1), [])


class TestCoarseSelection(unittest.TestCase):
    def test_candidates_three_apart_are_all_kept(self) -> None:
        candidates = [
            candidate(2026, 1, 2),
            candidate(2026, 2, 5),
            candidate(2026, 3, 9),
            candidate(2026, 4, 40),
        ]

        bands = select_month_bands(candidates, 14)

        self.assertEqual([band["bucket_index"] for band in bands], [2, 5, 9, 40])

    def test_latest_month_always_kept(self) -> None:
        candidates = [candidate(2026, 1, 0), candidate(2026, 2, 1), candidate(2026, 3, 2)]

        bands = select_month_bands(candidates, 30)

        self.assertEqual([band["bucket_index"] for band in bands], [2])
        self.assertEqual(bands[0]["month_start"], pendulum.date(2026, 3, 1))

    def test_skips_candidates_too_close_to_last_kept(self) -> None:
        candidates = [candidate(2026, 1, 0), candidate(2026, 2, 1), candidate(2026, 3, 10)]

        bands = select_month_bands(candidates, 30)

        self.assertEqual([band["bucket_index"] for band in bands], [0, 10])


class TestFineSelection(unittest.TestCase):
    def test_later_month_wins_conflict(self) -> None:
        candidates = [candidate(2026, 10, 0), candidate(2026, 11, 2)]

        bands = select_month_bands(candidates, 1)

        self.assertEqual(len(bands), 1)
        self.assertEqual(bands[0]["short_label"], "Nov")
        self.assertEqual(bands[0]["bucket_index"], 2)

    def test_distant_months_are_both_kept(self) -> None:
        candidates = [candidate(2026, 10, 0), candidate(2026, 11, 20)]

        bands = select_month_bands(candidates, 1)

        self.assertEqual([band["bucket_index"] for band in bands], [0, 20])

    def test_candidates_three_apart_conflict(self) -> None:
        candidates = [candidate(2026, 10, 0), candidate(2026, 11, 3)]

        bands = select_month_bands(candidates, 1)

        self.assertEqual([band["bucket_index"] for band in bands], [3])
        self.assertEqual(bands[0]["short_label"], "Nov")

    def test_candidates_four_apart_are_both_kept(self) -> None:
        candidates = [candidate(2026, 10, 0), candidate(2026, 11, 4)]

        bands = select_month_bands(candidates, 1)

        self.assertEqual([band["bucket_index"] for band in bands], [0, 4])

    def test_sixty_day_window_labels_both_boundaries(self) -> None:
        # 2026-10-12 to 2026-12-10
        buckets = generate_buckets(pendulum.datetime(2026, 10, 19, tz="UTC"), 1, 60)

        bands = layout_month_bands(buckets, 1)

        self.assertEqual(
            [(band["short_label"], band["bucket_index"]) for band in bands],
            [("Oct", 0), ("Nov", 20), ("Dec", 50)],
        )

    def test_result_sorted_and_spaced(self) -> None:
        buckets = generate_buckets(pendulum.datetime(2026, 10, 19, tz="UTC"), 7, 40)

        bands = layout_month_bands(buckets, 7)

        indexes = [band["bucket_index"] for band in bands]
        self.assertEqual(indexes, sorted(indexes))
        for previous, current in zip(indexes, indexes[1:]):
            self.assertGreaterEqual(current - previous, 3)


class TestBandLabels(unittest.TestCase):
    def test_january_is_flagged_with_year(self) -> None:
        buckets = generate_buckets(pendulum.datetime(2026, 12, 20, tz="UTC"), 1, 30)

        bands = layout_month_bands(buckets, 1)

        january = [band for band in bands if band["is_january"]]
        self.assertEqual(len(january), 1)
        self.assertEqual(january[0]["label"], "Jan 2027")
        self.assertEqual(january[0]["short_label"], "Jan")
        self.assertEqual(bands[0]["label"], "Dec 2026")
        self.assertFalse(bands[0]["is_january"])

    def test_rejects_invalid_width(self) -> None:
        with self.assertRaises(InvalidConfig):
            layout_month_bands([pendulum.datetime(2026, 10, 19, tz="UTC")], 0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
