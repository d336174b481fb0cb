# SPDX-License-Identifier: MIT

import logging

from heatday.color import hex_to_rgb
from heatday.heatmap.aggregate import aggregate
from heatday.heatmap.bucket import generate_buckets
from heatday.heatmap.capacity import fit_bucket_count, fit_cell_extent
from heatday.heatmap.intensity import cell_color, intensity, square_opacity
from heatday.heatmap.month_band import layout_month_bands
from heatday.model.entity_id import EntityId
from heatday.model.event import Event
from heatday.model.heatmap import BucketKey, HeatmapCell, HeatmapConfig, HeatmapGrid
from heatday.model.project import Project
from heatday.model.task import Task
from heatday.time import datetime_to_iso_str

logger = logging.getLogger(__name__)


def build_heatmap_grid(
    projects: list[Project],
    tasks: list[Task],
    events: list[Event],
    config: HeatmapConfig,
) -> HeatmapGrid:
    """
    Compute everything a renderer needs to draw the heatmap.

    Fits the bucket count to the available extent, generates the buckets,
    aggregates tasks and events into them, maps each aggregate to intensity,
    color and opacity, and lays out the month labels.

    Args:
        projects: Snapshot of all projects
        tasks: Snapshot of all tasks
        events: Snapshot of all events
        config: Pivot, today, bucket width, extents and aggregation settings

    Returns:
        The renderable grid description
    """
    bucket_width_days = config["bucket_width_days"]

    bucket_count = fit_bucket_count(
        config["available_extent"],
        config["reserved_label_extent"],
        config["min_cell_extent"],
        config["max_cell_extent"],
    )
    cell_extent = fit_cell_extent(
        config["available_extent"],
        config["reserved_label_extent"],
        bucket_count,
        config["min_cell_extent"],
        config["max_cell_extent"],
    )
    buckets = generate_buckets(config["pivot"], bucket_width_days, bucket_count)
    logger.debug(
        "Fitted %d buckets of %d days, %d wide, starting %s",
        bucket_count,
        bucket_width_days,
        cell_extent,
        buckets[0].to_date_string(),
    )

    aggregates = aggregate(
        projects, tasks, events, buckets, bucket_width_days, config["bucket_match"]
    )

    cells: dict[EntityId, dict[BucketKey, HeatmapCell]] = {}
    for project in projects:
        base_color = hex_to_rgb(project["color"])
        project_aggregates = aggregates[project["id"]]
        project_cells: dict[BucketKey, HeatmapCell] = {}
        for bucket in buckets:
            key = datetime_to_iso_str(bucket)
            bucket_aggregate = project_aggregates[key]
            completed_count = bucket_aggregate["completed_count"]
            level = intensity(completed_count, config["intensity_cap"])
            project_cells[key] = {
                "completed_count": completed_count,
                "intensity": level,
                "color": cell_color(base_color, level),
                "opacity": square_opacity(
                    completed_count, bucket, config["today"], config["intensity_cap"]
                ),
                "events": bucket_aggregate["events"],
                "has_deadline": any(
                    event["type"] == "deadline" for event in bucket_aggregate["events"]
                ),
                "has_milestone": any(
                    event["type"] == "milestone" for event in bucket_aggregate["events"]
                ),
                "is_past": bucket.date() < config["today"],
            }
        cells[project["id"]] = project_cells

    ordered_projects = sorted(projects, key=lambda project: project["order"])

    return {
        "buckets": buckets,
        "bucket_width_days": bucket_width_days,
        "cell_extent": cell_extent,
        "rows": [project for project in ordered_projects if not project["hidden"]],
        "hidden_projects": [project for project in ordered_projects if project["hidden"]],
        "cells": cells,
        "month_bands": layout_month_bands(buckets, bucket_width_days),
    }
