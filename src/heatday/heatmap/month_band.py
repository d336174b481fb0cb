# SPDX-License-Identifier: MIT

import pendulum

from heatday.heatmap.bucket import bucket_days
from heatday.heatmap.error import InvalidConfig
from heatday.model.heatmap import MonthBand, MonthCandidate

# Labels closer than this many buckets would overlap
MIN_LABEL_SPACING = int(3.5)

# Widths above this use the coarse selection policy
COARSE_WIDTH_THRESHOLD = 10


def layout_month_bands(
    buckets: list[pendulum.DateTime], bucket_width_days: int
) -> list[MonthBand]:
    """
    Place month labels over a bucket sequence without overlaps.

    Args:
        buckets: Bucket start instants from generate_buckets
        bucket_width_days: Calendar days covered by one bucket

    Returns:
        Month bands sorted by bucket index
    """
    if bucket_width_days < 1:
        raise InvalidConfig(f"bucket_width_days must be >= 1, got {bucket_width_days}")
    candidates = find_month_candidates(buckets, bucket_width_days)
    return select_month_bands(candidates, bucket_width_days)


def find_month_candidates(
    buckets: list[pendulum.DateTime], bucket_width_days: int
) -> list[MonthCandidate]:
    """
    Find the buckets a month starts in.

    A bucket yields at most one candidate, for the first 1st-of-month among
    its days. When the first bucket yields none, a candidate for its own month
    is added so the view never starts unlabeled.
    """
    candidates: list[MonthCandidate] = []
    for index, bucket in enumerate(buckets):
        for day in bucket_days(bucket, bucket_width_days):
            if day.day == 1:
                candidates.append({"month_start": day, "bucket_index": index})
                break

    if buckets and (not candidates or candidates[0]["bucket_index"] != 0):
        candidates.insert(
            0,
            {
                "month_start": buckets[0].date().start_of("month"),
                "bucket_index": 0,
            },
        )
    return candidates


def select_month_bands(
    candidates: list[MonthCandidate], bucket_width_days: int
) -> list[MonthBand]:
    """Pick the candidates to label according to the width's policy."""
    ordered = sorted(candidates, key=lambda candidate: candidate["bucket_index"])
    if bucket_width_days > COARSE_WIDTH_THRESHOLD:
        kept = _select_coarse(ordered)
    else:
        kept = _select_fine(ordered)

    kept.sort(key=lambda candidate: candidate["bucket_index"])
    return [_to_band(candidate) for candidate in kept]


def _select_coarse(ordered: list[MonthCandidate]) -> list[MonthCandidate]:
    if not ordered:
        return []

    latest = max(
        ordered,
        key=lambda candidate: (candidate["month_start"], candidate["bucket_index"]),
    )
    kept = [latest]
    last_kept_index = None
    for candidate in ordered:
        if candidate is latest:
            continue
        index = candidate["bucket_index"]
        if abs(latest["bucket_index"] - index) < MIN_LABEL_SPACING:
            continue
        if last_kept_index is not None and index - last_kept_index < MIN_LABEL_SPACING:
            continue
        kept.append(candidate)
        last_kept_index = index
    return kept


def _select_fine(ordered: list[MonthCandidate]) -> list[MonthCandidate]:
    kept: list[MonthCandidate] = []
    for candidate in ordered:
        conflict = next(
            (
                other
                for other in kept
                if abs(other["bucket_index"] - candidate["bucket_index"])
                <= MIN_LABEL_SPACING
            ),
            None,
        )
        if conflict is None:
            kept.append(candidate)
        elif candidate["month_start"] > conflict["month_start"]:
            kept.remove(conflict)
            kept.append(candidate)
    return kept


def _to_band(candidate: MonthCandidate) -> MonthBand:
    month_start = candidate["month_start"]
    return {
        "label": month_start.format("MMM YYYY"),
        "short_label": month_start.format("MMM"),
        "month_start": month_start,
        "bucket_index": candidate["bucket_index"],
        "is_january": month_start.month == 1,
    }
