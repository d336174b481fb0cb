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


class ServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmpdir = tempfile.TemporaryDirectory()
        configuration.set_data_path(Path(self._tmpdir.name))
        reset_repositories()

    def tearDown(self) -> None:
        reset_repositories()
        self._tmpdir.cleanup()


class TestCreateProject(ServiceTestCase):
    def test_appends_to_display_order(self) -> None:
        first = project_service.create_project("Alpha")
        second = project_service.create_project("Beta", "#10B981")

        self.assertEqual(first["order"], 0)
        self.assertEqual(second["order"], 1)
        self.assertEqual(second["color"], "#10b981")
        self.assertFalse(second["hidden"])
        self.assertFalse(second["collapsed"])

    def test_random_color_when_omitted(self) -> None:
        project = project_service.create_project("Alpha")

        self.assertRegex(project["color"], r"^#[0-9a-f]{6}$")

    def test_name_is_stripped_and_checked(self) -> None:
        self.assertEqual(project_service.create_project("  Alpha  ")["name"], "Alpha")
        with self.assertRaises(EntityValidationError):
            project_service.create_project("A")
        with self.assertRaises(EntityValidationError):
            project_service.create_project("   ")
        with self.assertRaises(EntityValidationError):
            project_service.create_project("x" * 51)

    def test_rejects_bad_color(self) -> None:
        with self.assertRaises(EntityValidationError):
            project_service.create_project("Alpha", "blue")


class TestUpdateProject(ServiceTestCase):
    def test_partial_patch(self) -> None:
        project = project_service.create_project("Alpha", "#ff0000")

        updated = project_service.update_project(project["id"], hidden=True)

        self.assertTrue(updated["hidden"])
        self.assertEqual(updated["name"], "Alpha")
        self.assertEqual(updated["color"], "#ff0000")
        self.assertFalse(updated["collapsed"])

    def test_validates_fields(self) -> None:
        project = project_service.create_project("Alpha")

        with self.assertRaises(EntityValidationError):
            project_service.update_project(project["id"], name="A")
        with self.assertRaises(EntityValidationError):
            project_service.update_project(project["id"], order=-1)

    def test_unknown_project(self) -> None:
        with self.assertRaises(EntityNotFoundError):
            project_service.update_project("missing", name="Alpha")


class TestMoveProject(ServiceTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.a = project_service.create_project("Alpha")
        self.b = project_service.create_project("Beta")
        self.c = project_service.create_project("Gamma")

    def orders(self) -> dict[str, int]:
        return {p["name"]: p["order"] for p in PROJECT_REPO.get_all_projects()}

    def test_move_up_swaps_with_previous(self) -> None:
        self.assertTrue(project_service.move_project(self.c["id"], "up"))

        self.assertEqual(self.orders(), {"Alpha": 0, "Gamma": 1, "Beta": 2})
        self.assertEqual(
            [p["name"] for p in PROJECT_REPO.get_all_projects()],
            ["Alpha", "Gamma", "Beta"],
        )

    def test_move_down_swaps_with_next(self) -> None:
        self.assertTrue(project_service.move_project(self.a["id"], "down"))

        self.assertEqual(self.orders(), {"Beta": 0, "Alpha": 1, "Gamma": 2})

    def test_no_neighbour_is_a_no_op(self) -> None:
        self.assertFalse(project_service.move_project(self.a["id"], "up"))
        self.assertFalse(project_service.move_project(self.c["id"], "down"))

        self.assertEqual(self.orders(), {"Alpha": 0, "Beta": 1, "Gamma": 2})


class TestDeleteProject(ServiceTestCase):
    def test_cascades_and_closes_order_gap(self) -> None:
        a = project_service.create_project("Alpha")
        b = project_service.create_project("Beta")
        c = project_service.create_project("Gamma")
        milestone = event_service.create_event(
            b["id"], "Review", NOW.add(days=3), "milestone", now=NOW
        )
        task_service.create_task(b["id"], "Write draft", milestone["id"])
        kept_task = task_service.create_task(a["id"], "Plan")

        project_service.delete_project(b["id"])

        self.assertIsNone(PROJECT_REPO.find_project(b["id"]))
        self.assertEqual(TASK_REPO.get_all_tasks(b["id"]), [])
        self.assertEqual(EVENT_REPO.get_all_events(b["id"]), [])
        self.assertIsNotNone(TASK_REPO.find_task(kept_task["id"]))
        self.assertEqual(project_service.get_project(a["id"])["order"], 0)
        self.assertEqual(project_service.get_project(c["id"])["order"], 1)

    def test_unknown_project(self) -> None:
        with self.assertRaises(EntityNotFoundError):
            project_service.delete_project("missing")


class TestPersistence(ServiceTestCase):
    def test_flush_and_reload(self) -> None:
        project = project_service.create_project("Alpha", "#ff0000")

        self.assertTrue(PROJECT_REPO.flush())
        PROJECT_REPO.reset()

        reloaded = project_service.get_project(project["id"])
        self.assertEqual(reloaded["name"], "Alpha")
        self.assertEqual(reloaded["created"], project["created"])
        self.assertTrue((configuration.DATA_PROJECTS_DIR / f"{project['id']}.yaml").is_file())


if __name__ == "__main__":
    unittest.main(verbosity=2)
