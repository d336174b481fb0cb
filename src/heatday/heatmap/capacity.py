# SPDX-License-Identifier: MIT

import math
from typing import Optional

from heatday.heatmap.error import InvalidConfig

# Fewer buckets than this is not a usable view, however narrow the surface
MIN_BUCKET_COUNT = 20

DEFAULT_RESIZE_DEBOUNCE_MS = 100


def _require_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidConfig(f"{name} must be finite, got {value}")


def _check_cell_extents(min_cell_extent: float, max_cell_extent: float) -> None:
    _require_finite("min_cell_extent", min_cell_extent)
    _require_finite("max_cell_extent", max_cell_extent)
    if min_cell_extent <= 0:
        raise InvalidConfig(f"min_cell_extent must be > 0, got {min_cell_extent}")
    if max_cell_extent < min_cell_extent:
        raise InvalidConfig(
            f"max_cell_extent ({max_cell_extent}) is smaller than "
            f"min_cell_extent ({min_cell_extent})"
        )


def fit_bucket_count(
    available_extent: float,
    reserved_label_extent: float,
    min_cell_extent: float,
    max_cell_extent: float,
) -> int:
    """
    Derive how many buckets fit the rendering surface.

    The usable extent (available minus the label column) is divided by the
    minimum cell extent and rounded down so the grid never overflows. The
    result is never below MIN_BUCKET_COUNT. There is no upper clamp.

    Args:
        available_extent: Total linear extent of the surface
        reserved_label_extent: Extent taken by the project label column
        min_cell_extent: Smallest extent a cell may be drawn with
        max_cell_extent: Largest extent a cell may be drawn with

    Returns:
        Number of buckets to request from generate_buckets

    Raises:
        InvalidConfig: If an extent is not finite or the cell extents are unusable
    """
    _require_finite("available_extent", available_extent)
    _require_finite("reserved_label_extent", reserved_label_extent)
    _check_cell_extents(min_cell_extent, max_cell_extent)

    usable = available_extent - reserved_label_extent
    return max(MIN_BUCKET_COUNT, math.floor(usable / min_cell_extent))


def fit_cell_extent(
    available_extent: float,
    reserved_label_extent: float,
    bucket_count: int,
    min_cell_extent: float,
    max_cell_extent: float,
) -> int:
    """Extent each cell is drawn with once bucket_count buckets are laid out."""
    _require_finite("available_extent", available_extent)
    _require_finite("reserved_label_extent", reserved_label_extent)
    _check_cell_extents(min_cell_extent, max_cell_extent)
    if bucket_count < 1:
        raise InvalidConfig(f"bucket_count must be >= 1, got {bucket_count}")

    usable = available_extent - reserved_label_extent
    per_cell = math.floor(usable / bucket_count)
    return int(max(min_cell_extent, min(max_cell_extent, per_cell)))


class ResizeDebouncer:
    """
    Collapse a burst of extent changes into a single refit.

    Feed every observed extent to observe() along with a monotonic timestamp
    in seconds. The first extent is reported immediately. After that a new
    extent is only reported once it has held for delay_ms.
    """

    def __init__(self, delay_ms: int = DEFAULT_RESIZE_DEBOUNCE_MS) -> None:
        if delay_ms < 0:
            raise InvalidConfig(f"delay_ms must be >= 0, got {delay_ms}")
        self.delay_ms = delay_ms
        self._settled: Optional[float] = None
        self._pending: Optional[float] = None
        self._pending_since = 0.0

    @property
    def settled_extent(self) -> Optional[float]:
        return self._settled

    def observe(self, extent: float, now: float) -> Optional[float]:
        if self._settled is None:
            self._settled = extent
            return extent

        if extent != self._pending:
            if extent == self._settled:
                # Resized back before the change settled
                self._pending = None
                return None
            self._pending = extent
            self._pending_since = now

        if (now - self._pending_since) * 1000 >= self.delay_ms:
            self._settled = extent
            self._pending = None
            return extent
        return None
