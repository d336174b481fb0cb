# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from heatday.color import is_hex_color, normalize_hex_color


def validate_color(color: Optional[str]) -> Optional[str]:
    if color is None:
        return None
    if not is_hex_color(color):
        raise typer.BadParameter("Color must be a hex value like #3b82f6")
    return normalize_hex_color(color)


def validate_bucket_width(width: Optional[int]) -> Optional[int]:
    if width is None:
        return None
    if width < 1:
        raise typer.BadParameter("Bucket width must be at least 1 day")
    return width


def validate_positive(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if value < 1:
        raise typer.BadParameter("Value must be at least 1")
    return value


def validate_non_negative(value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if value < 0:
        raise typer.BadParameter("Value must be 0 or greater")
    return value


def validate_reload_interval(seconds: float) -> float:
    if seconds <= 0:
        raise typer.BadParameter("Reload interval must be greater than 0 seconds")
    return seconds
