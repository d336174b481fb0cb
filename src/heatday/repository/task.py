# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from heatday import configuration, time
from heatday.model.entity_id import EntityId
from heatday.model.task import Task


class TaskRepository:
    def __init__(self) -> None:
        self._tasks: Optional[list[Task]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def __load_data(self) -> None:
        self._tasks = []
        if not configuration.DATA_TASKS_DIR.is_dir():
            return
        for file_path in sorted(configuration.DATA_TASKS_DIR.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            raw_task = load(file_path.read_text(), Loader=Loader)
            if raw_task is not None:
                self._tasks.append(self.__convert_task_for_deserialization(raw_task))
        self._tasks.sort(key=lambda task: task["created"])

    def __save_data(self) -> None:
        configuration.DATA_TASKS_DIR.mkdir(parents=True, exist_ok=True)

        # Write dirty entities
        for task in self.tasks:
            if task["id"] in self._dirty_ids:
                serializable_task = self.__convert_task_for_serialization(
                    deepcopy(task)
                )
                file_path = configuration.DATA_TASKS_DIR / f"{task['id']}.yaml"
                file_path.write_text(dump(serializable_task, Dumper=Dumper))

        # Remove hard-deleted entity files
        for entity_id in self._deleted_ids:
            file_path = configuration.DATA_TASKS_DIR / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._tasks is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        """Drop cached tasks so the next access reloads from disk."""
        self._tasks = None
        self.is_dirty = False
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def __convert_task_for_serialization(self, task: Task) -> dict[str, Any]:
        serializable_task = cast(dict[str, Any], task)
        serializable_task["created"] = time.datetime_to_iso_str(
            serializable_task["created"]
        )
        serializable_task["updated"] = time.datetime_to_iso_str(
            serializable_task["updated"]
        )
        return serializable_task

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> Task:
        task["created"] = time.datetime_from_str(task["created"])
        task["updated"] = time.datetime_from_str(task["updated"])
        return cast(Task, task)

    def save_new_task(self, task: Task) -> EntityId:
        self.is_dirty = True
        self.tasks.append(task)
        self._dirty_ids.add(task["id"])
        return task["id"]

    def modify_task(
        self,
        id: EntityId,
        name: Optional[str] = None,
        completed: Optional[bool] = None,
        event_id: Optional[EntityId] = None,
        remove_event_id: bool = False,
    ) -> None:
        self.is_dirty = True
        self._dirty_ids.add(id)

        task = [task for task in self.tasks if task["id"] == id][0]
        task["updated"] = time.now_utc()
        if name is not None:
            task["name"] = name
        if completed is not None:
            task["completed"] = completed
        if event_id is not None:
            task["event_id"] = event_id

        if remove_event_id:
            task["event_id"] = None

    def delete_task(self, id: EntityId) -> None:
        self.is_dirty = True
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)
        self._tasks = [task for task in self.tasks if task["id"] != id]

    def delete_tasks_for_project(self, project_id: EntityId) -> int:
        """Hard delete every task owned by a project.

        Returns:
            Number of tasks deleted
        """
        project_task_ids = [
            task["id"] for task in self.tasks if task["project_id"] == project_id
        ]
        for task_id in project_task_ids:
            self.delete_task(task_id)
        return len(project_task_ids)

    def clear_event(self, event_id: EntityId) -> int:
        """Detach every task from an event.

        Returns:
            Number of tasks that referenced the event
        """
        referencing_task_ids = [
            task["id"] for task in self.tasks if task["event_id"] == event_id
        ]
        for task_id in referencing_task_ids:
            self.modify_task(task_id, remove_event_id=True)
        return len(referencing_task_ids)

    def get_all_tasks(self, project_id: Optional[EntityId] = None) -> list[Task]:
        if project_id is None:
            return deepcopy(self.tasks)
        return deepcopy([task for task in self.tasks if task["project_id"] == project_id])

    def find_task(self, id: EntityId) -> Optional[Task]:
        matching = [task for task in self.tasks if task["id"] == id]
        if len(matching) == 0:
            return None
        return deepcopy(matching[0])


TASK_REPO = TaskRepository()
