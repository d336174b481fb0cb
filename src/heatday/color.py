# SPDX-License-Identifier: MIT

import random
import re

type RGB = tuple[int, int, int]
type RGBA = tuple[int, int, int, float]

HEX_COLOR_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")

# Terminal background the heatmap cells are composited over
BACKGROUND_COLOR: RGB = (0, 0, 0)

DEADLINE_COLOR = "bold red"
MILESTONE_COLOR = "bold yellow"
COMPLETED_TASK_COLOR = "bright_black"


def get_random_color() -> str:
    """Return a random project color.

    These colors are chosen for good visibility on a dark terminal.
    """
    colors = [
        "#3b82f6",
        "#ef4444",
        "#10b981",
        "#f59e0b",
        "#8b5cf6",
        "#ec4899",
        "#06b6d4",
        "#84cc16",
        "#f97316",
        "#6366f1",
    ]
    return random.choice(colors)


def is_hex_color(value: str) -> bool:
    return HEX_COLOR_PATTERN.match(value) is not None


def normalize_hex_color(value: str) -> str:
    match = HEX_COLOR_PATTERN.match(value)
    if match is None:
        raise ValueError(f"Invalid color '{value}', expected #rrggbb")
    return f"#{match.group(1).lower()}"


def hex_to_rgb(value: str) -> RGB:
    hex_digits = normalize_hex_color(value)[1:]
    return (
        int(hex_digits[0:2], 16),
        int(hex_digits[2:4], 16),
        int(hex_digits[4:6], 16),
    )
