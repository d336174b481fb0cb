# SPDX-License-Identifier: MIT

import pendulum

from heatday.heatmap.error import InvalidConfig

# The window always opens this many days before the pivot date
LOOKBACK_DAYS = 7

# Navigating moves the pivot by this many buckets
NAVIGATION_STEP_BUCKETS = 7


def generate_buckets(
    pivot: pendulum.DateTime,
    bucket_width_days: int,
    bucket_count: int,
) -> list[pendulum.DateTime]:
    """
    Generate the start instant of every bucket in the visible window.

    The first bucket starts at midnight of the pivot's calendar date, in the
    pivot's own time zone, minus LOOKBACK_DAYS calendar days. Every following
    bucket starts bucket_width_days calendar days after the previous one.

    Args:
        pivot: The date the window is anchored around
        bucket_width_days: Calendar days covered by one bucket (>= 1)
        bucket_count: Number of buckets to generate (>= 1)

    Returns:
        List of bucket_count bucket start instants, strictly increasing

    Raises:
        InvalidConfig: If the width or the count is below 1
    """
    if bucket_width_days < 1:
        raise InvalidConfig(f"bucket_width_days must be >= 1, got {bucket_width_days}")
    if bucket_count < 1:
        raise InvalidConfig(f"bucket_count must be >= 1, got {bucket_count}")

    first = pivot.start_of("day").subtract(days=LOOKBACK_DAYS)
    return [first.add(days=i * bucket_width_days) for i in range(bucket_count)]


def bucket_days(
    bucket_start: pendulum.DateTime, bucket_width_days: int
) -> list[pendulum.Date]:
    """Calendar days covered by a bucket, in order."""
    start_date = bucket_start.date()
    return [start_date.add(days=offset) for offset in range(bucket_width_days)]


def bucket_end(
    bucket_start: pendulum.DateTime, bucket_width_days: int
) -> pendulum.DateTime:
    """Exclusive end instant of a bucket."""
    return bucket_start.add(days=bucket_width_days)


def shift_pivot(
    pivot: pendulum.DateTime, bucket_width_days: int, steps: int
) -> pendulum.DateTime:
    """Move the pivot forward (positive steps) or back (negative steps) one page."""
    return pivot.add(days=steps * bucket_width_days * NAVIGATION_STEP_BUCKETS)
