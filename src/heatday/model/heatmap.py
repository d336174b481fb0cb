# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from heatday.color import RGBA
from heatday.configuration import BucketMatch
from heatday.model.entity_id import EntityId
from heatday.model.event import Event
from heatday.model.project import Project

# ISO-8601 string of a bucket's start instant
type BucketKey = str


class BucketAggregate(TypedDict):
    completed_count: int
    events: list[Event]


type ProjectAggregates = dict[EntityId, dict[BucketKey, BucketAggregate]]


class HeatmapCell(TypedDict):
    completed_count: int
    intensity: float
    color: RGBA
    opacity: float
    events: list[Event]
    has_deadline: bool
    has_milestone: bool
    is_past: bool


class MonthCandidate(TypedDict):
    month_start: pendulum.Date
    bucket_index: int


class MonthBand(TypedDict):
    label: str
    short_label: str
    month_start: pendulum.Date
    bucket_index: int
    is_january: bool


class HeatmapConfig(TypedDict):
    pivot: pendulum.DateTime
    today: pendulum.Date
    bucket_width_days: int
    available_extent: float
    reserved_label_extent: float
    min_cell_extent: float
    max_cell_extent: float
    intensity_cap: int
    bucket_match: BucketMatch


class HeatmapGrid(TypedDict):
    buckets: list[pendulum.DateTime]
    bucket_width_days: int
    cell_extent: int
    rows: list[Project]
    hidden_projects: list[Project]
    cells: dict[EntityId, dict[BucketKey, HeatmapCell]]
    month_bands: list[MonthBand]
