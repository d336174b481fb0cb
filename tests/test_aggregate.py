# SPDX-License-Identifier: MIT

import unittest
from typing import Optional

import pendulum

from heatday.heatmap.aggregate import aggregate
from heatday.heatmap.bucket import generate_buckets
from heatday.heatmap.error import InvalidConfig
from heatday.model.event import Event, EventType
from heatday.model.project import Project
from heatday.model.task import Task
from heatday.time import datetime_to_iso_str

CREATED = pendulum.datetime(2026, 10, 1, tz="UTC")


def make_project(id: str, order: int = 0) -> Project:
    return {
        "id": id,
        "entity_type": "project",
        "name": f"Project {id}",
        "color": "#3b82f6",
        "hidden": False,
        "collapsed": False,
        "order": order,
        "created": CREATED,
        "updated": CREATED,
    }


def make_task(
    id: str,
    project_id: str,
    created: pendulum.DateTime,
    completed: bool = True,
    event_id: Optional[str] = None,
) -> Task:
    return {
        "id": id,
        "entity_type": "task",
        "project_id": project_id,
        "event_id": event_id,
        "name": f"Task {id}",
        "completed": completed,
        "created": created,
        "updated": created,
    }


def make_event(
    id: str, project_id: str, date: pendulum.DateTime, type: EventType = "milestone"
) -> Event:
    return {
        "id": id,
        "entity_type": "event",
        "project_id": project_id,
        "name": f"Event {id}",
        "date": date,
        "type": type,
        "created": CREATED,
        "updated": CREATED,
    }


def key(year: int, month: int, day: int, tz: str = "UTC") -> str:
    return datetime_to_iso_str(pendulum.datetime(year, month, day, tz=tz))


class TestAggregate(unittest.TestCase):
    def setUp(self) -> None:
        self.projects = [make_project("a", 0), make_project("b", 1)]
        self.buckets = generate_buckets(pendulum.datetime(2026, 10, 19, 12, tz="UTC"), 1, 20)

    def test_every_project_gets_every_bucket(self) -> None:
        result = aggregate(self.projects, [], [], self.buckets)

        self.assertEqual(set(result), {"a", "b"})
        for project_buckets in result.values():
            self.assertEqual(len(project_buckets), 20)
            for bucket_aggregate in project_buckets.values():
                self.assertEqual(bucket_aggregate["completed_count"], 0)
                self.assertEqual(bucket_aggregate["events"], [])

    def test_counts_only_completed_tasks(self) -> None:
        tasks = [
            make_task("1", "a", pendulum.datetime(2026, 10, 19, 8, tz="UTC")),
            make_task("2", "a", pendulum.datetime(2026, 10, 19, 22, tz="UTC")),
            make_task("3", "a", pendulum.datetime(2026, 10, 19, 9, tz="UTC"), completed=False),
            make_task("4", "b", pendulum.datetime(2026, 10, 20, 9, tz="UTC")),
        ]

        result = aggregate(self.projects, tasks, [], self.buckets)

        self.assertEqual(result["a"][key(2026, 10, 19)]["completed_count"], 2)
        self.assertEqual(result["a"][key(2026, 10, 20)]["completed_count"], 0)
        self.assertEqual(result["b"][key(2026, 10, 20)]["completed_count"], 1)

    def test_events_land_on_their_date(self) -> None:
        deadline = make_event("d", "a", pendulum.datetime(2026, 10, 25, 17, tz="UTC"), "deadline")
        milestone = make_event("m", "b", pendulum.datetime(2026, 10, 21, 9, tz="UTC"))

        result = aggregate(self.projects, [], [deadline, milestone], self.buckets)

        self.assertEqual(result["a"][key(2026, 10, 25)]["events"], [deadline])
        self.assertEqual(result["b"][key(2026, 10, 21)]["events"], [milestone])
        self.assertEqual(result["a"][key(2026, 10, 21)]["events"], [])

    def test_ignores_unknown_projects(self) -> None:
        tasks = [make_task("1", "gone", pendulum.datetime(2026, 10, 19, tz="UTC"))]
        events = [make_event("e", "gone", pendulum.datetime(2026, 10, 19, tz="UTC"))]

        result = aggregate(self.projects, tasks, events, self.buckets)

        self.assertNotIn("gone", result)
        self.assertEqual(result["a"][key(2026, 10, 19)]["completed_count"], 0)

    def test_outside_window_is_dropped(self) -> None:
        tasks = [make_task("1", "a", pendulum.datetime(2026, 9, 1, tz="UTC"))]

        result = aggregate(self.projects, tasks, [], self.buckets)

        total = sum(b["completed_count"] for b in result["a"].values())
        self.assertEqual(total, 0)


class TestWideBuckets(unittest.TestCase):
    def setUp(self) -> None:
        self.projects = [make_project("a")]
        # Buckets start 2026-10-12, 2026-10-15, ...
        self.buckets = generate_buckets(pendulum.datetime(2026, 10, 19, tz="UTC"), 3, 20)
        self.tasks = [
            make_task("1", "a", pendulum.datetime(2026, 10, 12, 10, tz="UTC")),
            make_task("2", "a", pendulum.datetime(2026, 10, 13, 10, tz="UTC")),
            make_task("3", "a", pendulum.datetime(2026, 10, 14, 10, tz="UTC")),
        ]

    def test_start_day_match_counts_first_day_only(self) -> None:
        result = aggregate(self.projects, self.tasks, [], self.buckets, 3)

        self.assertEqual(result["a"][key(2026, 10, 12)]["completed_count"], 1)
        self.assertEqual(result["a"][key(2026, 10, 15)]["completed_count"], 0)

    def test_range_match_counts_whole_span(self) -> None:
        result = aggregate(self.projects, self.tasks, [], self.buckets, 3, "range")

        self.assertEqual(result["a"][key(2026, 10, 12)]["completed_count"], 3)

    def test_rejects_unknown_match(self) -> None:
        with self.assertRaises(InvalidConfig):
            aggregate(self.projects, self.tasks, [], self.buckets, 3, "nearest")  # type: ignore[arg-type]
        with self.assertRaises(InvalidConfig):
            aggregate(self.projects, self.tasks, [], self.buckets, 0)


class TestCalendarTimeZone(unittest.TestCase):
    def test_dates_read_in_bucket_time_zone(self) -> None:
        projects = [make_project("a")]
        buckets = generate_buckets(
            pendulum.datetime(2026, 10, 19, 12, tz="America/New_York"), 1, 20
        )
        # 22:00 on the 19th in New York
        tasks = [make_task("1", "a", pendulum.datetime(2026, 10, 20, 2, tz="UTC"))]

        result = aggregate(projects, tasks, [], buckets)

        self.assertEqual(
            result["a"][key(2026, 10, 19, "America/New_York")]["completed_count"], 1
        )
        self.assertEqual(
            result["a"][key(2026, 10, 20, "America/New_York")]["completed_count"], 0
        )


if __name__ == "__main__":
    unittest.main(verbosity=2)
