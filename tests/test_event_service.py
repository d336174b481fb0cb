# SPDX-License-Identifier: MIT

import tempfile
import unittest
from pathlib import Path

import pendulum

from heatday import configuration
from heatday.repository.event import EVENT_REPO
from heatday.repository.id_map import ID_MAP_REPO
from heatday.repository.project import PROJECT_REPO
from heatday.repository.task import TASK_REPO
from heatday.service import event as event_service
from heatday.service import project as project_service
from heatday.service import task as task_service
from heatday.service.error import EntityNotFoundError, EntityValidationError

NOW = pendulum.datetime(2026, 10, 19, 12, tz="UTC")


def reset_repositories() -> None:
    PROJECT_REPO.reset()
    TASK_REPO.reset()
    EVENT_REPO.reset()
    ID_MAP_REPO.reset()


class EventServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        configuration.set_data_path(Path(self._tmpdir.name))
        reset_repositories()
        self.project = project_service.create_project("Alpha")
        self.other = project_service.create_project("Beta")

    def tearDown(self) -> None:
        reset_repositories()
        self._tmpdir.cleanup()


class TestCreateEvent(EventServiceTestCase):
    def test_stores_date_in_utc(self) -> None:
        date = pendulum.datetime(2026, 10, 25, 9, tz="Europe/Amsterdam")

        event = event_service.create_event(
            self.project["id"], "Review", date, "milestone", now=NOW
        )

        self.assertEqual(event["date"].timezone_name, "UTC")
        self.assertEqual(event["date"], date)
        self.assertEqual(event["type"], "milestone")

    def test_rejects_past_dates(self) -> None:
        # 2026-10-18 23:00 UTC, the evening before
        with self.assertRaises(EntityValidationError):
            event_service.create_event(
                self.project["id"], "Review", NOW.subtract(hours=13), "milestone", now=NOW
            )
        with self.assertRaises(EntityValidationError):
            event_service.create_event(
                self.project["id"], "Launch", NOW.subtract(days=1), "deadline", now=NOW
            )

    def test_accepts_now(self) -> None:
        event = event_service.create_event(
            self.project["id"], "Launch", NOW, "deadline", now=NOW
        )

        self.assertEqual(event["date"], NOW)

    def test_accepts_earlier_time_today(self) -> None:
        midnight = NOW.start_of("day")

        deadline = event_service.create_event(
            self.project["id"], "Launch", midnight, "deadline", now=NOW
        )
        milestone = event_service.create_event(
            self.project["id"], "Kickoff", NOW.subtract(minutes=1), "milestone", now=NOW
        )

        self.assertEqual(deadline["date"], midnight)
        self.assertEqual(milestone["type"], "milestone")

    def test_today_is_read_in_the_local_zone(self) -> None:
        now = pendulum.datetime(2026, 10, 19, 9, tz="America/New_York")
        # 2026-10-19 02:00 UTC is still 2026-10-18 in New York
        with self.assertRaises(EntityValidationError):
            event_service.create_event(
                self.project["id"],
                "Launch",
                pendulum.datetime(2026, 10, 19, 2, tz="UTC"),
                "deadline",
                now=now,
            )

    def test_rejects_unknown_type_and_project(self) -> None:
        with self.assertRaises(EntityValidationError):
            event_service.create_event(
                self.project["id"], "Review", NOW.add(days=1), "meeting", now=NOW
            )
        with self.assertRaises(EntityNotFoundError):
            event_service.create_event("missing", "Review", NOW.add(days=1), "milestone", now=NOW)

    def test_name_length(self) -> None:
        with self.assertRaises(EntityValidationError):
            event_service.create_event(
                self.project["id"], "x" * 101, NOW.add(days=1), "milestone", now=NOW
            )


class TestSingleDeadline(EventServiceTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.deadline = event_service.create_event(
            self.project["id"], "Launch", NOW.add(days=10), "deadline", now=NOW
        )

    def test_second_deadline_rejected(self) -> None:
        with self.assertRaises(EntityValidationError):
            event_service.create_event(
                self.project["id"], "Relaunch", NOW.add(days=20), "deadline", now=NOW
            )

    def test_milestones_and_other_projects_allowed(self) -> None:
        event_service.create_event(
            self.project["id"], "Beta release", NOW.add(days=5), "milestone", now=NOW
        )
        event_service.create_event(
            self.other["id"], "Launch", NOW.add(days=5), "deadline", now=NOW
        )

        self.assertEqual(len(EVENT_REPO.get_all_events(self.project["id"])), 2)

    def test_deadline_can_be_updated(self) -> None:
        updated = event_service.update_event(
            self.deadline["id"], name="Go live", date=NOW.add(days=12), type="deadline", now=NOW
        )

        self.assertEqual(updated["name"], "Go live")
        self.assertEqual(updated["date"], NOW.add(days=12))

    def test_milestone_cannot_become_second_deadline(self) -> None:
        milestone = event_service.create_event(
            self.project["id"], "Beta release", NOW.add(days=5), "milestone", now=NOW
        )

        with self.assertRaises(EntityValidationError):
            event_service.update_event(milestone["id"], type="deadline", now=NOW)

    def test_deleting_deadline_frees_the_slot(self) -> None:
        event_service.delete_event(self.deadline["id"])

        event = event_service.create_event(
            self.project["id"], "Relaunch", NOW.add(days=20), "deadline", now=NOW
        )
        self.assertEqual(event["type"], "deadline")


class TestDeleteEvent(EventServiceTestCase):
    def test_clears_task_references(self) -> None:
        event = event_service.create_event(
            self.project["id"], "Review", NOW.add(days=2), "milestone", now=NOW
        )
        task = task_service.create_task(self.project["id"], "Prepare slides", event["id"])

        event_service.delete_event(event["id"])

        self.assertIsNone(EVENT_REPO.find_event(event["id"]))
        remaining = task_service.get_task(task["id"])
        self.assertIsNone(remaining["event_id"])

    def test_unknown_event(self) -> None:
        with self.assertRaises(EntityNotFoundError):
            event_service.delete_event("missing")


if __name__ == "__main__":
    unittest.main(verbosity=2)
