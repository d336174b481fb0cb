# SPDX-License-Identifier: MIT

from collections import Counter, defaultdict
from typing import Union, get_args

import pendulum

from heatday.configuration import BucketMatch
from heatday.heatmap.bucket import bucket_days
from heatday.heatmap.error import InvalidConfig
from heatday.model.entity_id import EntityId
from heatday.model.event import Event
from heatday.model.heatmap import ProjectAggregates
from heatday.model.project import Project
from heatday.model.task import Task
from heatday.time import calendar_date, datetime_to_iso_str

type DayKey = tuple[EntityId, pendulum.Date]


def aggregate(
    projects: list[Project],
    tasks: list[Task],
    events: list[Event],
    buckets: list[pendulum.DateTime],
    bucket_width_days: int = 1,
    match: BucketMatch = "start_day",
) -> ProjectAggregates:
    """
    Aggregate completed tasks and events into every (project, bucket) pair.

    With match="start_day" a task or event lands in a bucket only when its
    calendar date equals the calendar date of the bucket start, even if the
    bucket spans several days. A completed task is dated by its creation
    time. With match="range" every day of the bucket's span counts.

    Calendar dates are read in the time zone of the bucket starts. Tasks and
    events that reference a project not in ``projects`` are ignored.

    Args:
        projects: Projects to aggregate for
        tasks: All tasks
        events: All events
        buckets: Bucket start instants from generate_buckets
        bucket_width_days: Calendar days covered by one bucket
        match: "start_day" or "range"

    Returns:
        project id -> bucket key (ISO start) -> {"completed_count", "events"}
    """
    if bucket_width_days < 1:
        raise InvalidConfig(f"bucket_width_days must be >= 1, got {bucket_width_days}")
    if match not in get_args(BucketMatch):
        raise InvalidConfig(f"Unknown bucket match '{match}'")

    tz: Union[pendulum.Timezone, pendulum.FixedTimezone, None] = None
    if buckets:
        tz = buckets[0].timezone

    project_ids = {project["id"] for project in projects}

    completed_by_day: Counter[DayKey] = Counter()
    for task in tasks:
        if task["completed"] and task["project_id"] in project_ids:
            completed_by_day[(task["project_id"], calendar_date(task["created"], tz))] += 1

    events_by_day: defaultdict[DayKey, list[Event]] = defaultdict(list)
    for event in events:
        if event["project_id"] in project_ids:
            events_by_day[(event["project_id"], calendar_date(event["date"], tz))].append(
                event
            )

    aggregates: ProjectAggregates = {}
    for project in projects:
        project_id = project["id"]
        project_buckets = {}
        for bucket in buckets:
            if match == "start_day":
                days = [bucket.date()]
            else:
                days = bucket_days(bucket, bucket_width_days)

            project_buckets[datetime_to_iso_str(bucket)] = {
                "completed_count": sum(completed_by_day[(project_id, day)] for day in days),
                "events": [
                    event
                    for day in days
                    for event in events_by_day.get((project_id, day), [])
                ],
            }
        aggregates[project_id] = project_buckets

    return aggregates
