# SPDX-License-Identifier: MIT

import pendulum

from heatday.color import BACKGROUND_COLOR, RGB, RGBA
from heatday.heatmap.error import InvalidConfig

DEFAULT_INTENSITY_CAP = 10

# Alpha floor so an empty cell still shows the project color
MIN_ALPHA = 0.1

EMPTY_SQUARE_OPACITY = 0.4
MIN_SQUARE_OPACITY = 0.3
MAX_SQUARE_OPACITY = 1.0
PAST_OPACITY_FACTOR = 0.7


def intensity(completed_count: int, cap: int = DEFAULT_INTENSITY_CAP) -> float:
    """Normalize a completed-task count into [0, 1], saturating at cap."""
    if cap < 1:
        raise InvalidConfig(f"intensity cap must be >= 1, got {cap}")
    return min(completed_count / cap, 1.0)


def cell_color(base_color: RGB, level: float) -> RGBA:
    r, g, b = base_color
    return (r, g, b, max(MIN_ALPHA, level))


def square_opacity(
    completed_count: int,
    bucket_start: pendulum.DateTime,
    today: pendulum.Date,
    cap: int = DEFAULT_INTENSITY_CAP,
) -> float:
    """
    Opacity of a cell drawn in the filled-square style.

    An empty bucket gets EMPTY_SQUARE_OPACITY. Otherwise opacity grows
    linearly from MIN_SQUARE_OPACITY to MAX_SQUARE_OPACITY with intensity.
    Buckets starting before today are muted by PAST_OPACITY_FACTOR.
    """
    level = intensity(completed_count, cap)
    if level == 0:
        opacity = EMPTY_SQUARE_OPACITY
    else:
        opacity = MIN_SQUARE_OPACITY + (MAX_SQUARE_OPACITY - MIN_SQUARE_OPACITY) * level

    if bucket_start.date() < today:
        opacity *= PAST_OPACITY_FACTOR
    return opacity


def blend(color: RGBA, background: RGB = BACKGROUND_COLOR) -> RGB:
    """Composite a translucent color over an opaque background."""
    r, g, b, alpha = color
    return (
        round(r * alpha + background[0] * (1 - alpha)),
        round(g * alpha + background[1] * (1 - alpha)),
        round(b * alpha + background[2] * (1 - alpha)),
    )
