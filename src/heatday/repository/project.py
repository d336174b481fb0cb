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
from heatday.model.project import Project


class ProjectRepository:
    def __init__(self) -> None:
        self._projects: Optional[list[Project]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def projects(self) -> list[Project]:
        if self._projects is None:
            self.__load_data()
        if self._projects is None:
            raise ValueError()
        return self._projects

    def __load_data(self) -> None:
        self._projects = []
        if not configuration.DATA_PROJECTS_DIR.is_dir():
            return
        for file_path in sorted(configuration.DATA_PROJECTS_DIR.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            raw_project = load(file_path.read_text(), Loader=Loader)
            if raw_project is not None:
                self._projects.append(
                    self.__convert_project_for_deserialization(raw_project)
                )

    def __save_data(self) -> None:
        configuration.DATA_PROJECTS_DIR.mkdir(parents=True, exist_ok=True)

        # Write dirty entities
        for project in self.projects:
            if project["id"] in self._dirty_ids:
                serializable_project = self.__convert_project_for_serialization(
                    deepcopy(project)
                )
                file_path = configuration.DATA_PROJECTS_DIR / f"{project['id']}.yaml"
                file_path.write_text(dump(serializable_project, Dumper=Dumper))

        # Remove hard-deleted entity files
        for entity_id in self._deleted_ids:
            file_path = configuration.DATA_PROJECTS_DIR / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._projects is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        """Drop cached projects so the next access reloads from disk."""
        self._projects = None
        self.is_dirty = False
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def __convert_project_for_serialization(self, project: Project) -> dict[str, Any]:
        serializable_project = cast(dict[str, Any], project)
        serializable_project["created"] = time.datetime_to_iso_str(
            serializable_project["created"]
        )
        serializable_project["updated"] = time.datetime_to_iso_str(
            serializable_project["updated"]
        )
        return serializable_project

    def __convert_project_for_deserialization(self, project: dict[str, Any]) -> Project:
        project["created"] = time.datetime_from_str(project["created"])
        project["updated"] = time.datetime_from_str(project["updated"])
        project.setdefault("collapsed", False)
        return cast(Project, project)

    def save_new_project(self, project: Project) -> EntityId:
        self.is_dirty = True
        self.projects.append(project)
        self._dirty_ids.add(project["id"])
        return project["id"]

    def modify_project(
        self,
        id: EntityId,
        name: Optional[str] = None,
        color: Optional[str] = None,
        hidden: Optional[bool] = None,
        collapsed: Optional[bool] = None,
        order: Optional[int] = None,
    ) -> None:
        self.is_dirty = True
        self._dirty_ids.add(id)

        project = [project for project in self.projects if project["id"] == id][0]
        project["updated"] = time.now_utc()
        if name is not None:
            project["name"] = name
        if color is not None:
            project["color"] = color
        if hidden is not None:
            project["hidden"] = hidden
        if collapsed is not None:
            project["collapsed"] = collapsed
        if order is not None:
            project["order"] = order

    def delete_project(self, id: EntityId) -> None:
        self.is_dirty = True
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)
        self._projects = [project for project in self.projects if project["id"] != id]

    def get_all_projects(self) -> list[Project]:
        """All projects, sorted by display order."""
        return deepcopy(sorted(self.projects, key=lambda project: project["order"]))

    def find_project(self, id: EntityId) -> Optional[Project]:
        matching = [project for project in self.projects if project["id"] == id]
        if len(matching) == 0:
            return None
        return deepcopy(matching[0])

    def find_project_by_order(self, order: int) -> Optional[Project]:
        matching = [project for project in self.projects if project["order"] == order]
        if len(matching) == 0:
            return None
        return deepcopy(matching[0])


PROJECT_REPO = ProjectRepository()
