# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

import pendulum
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from heatday import configuration, time
from heatday.model.entity_id import EntityId
from heatday.model.event import Event, EventType


class EventRepository:
    def __init__(self) -> None:
        self._events: Optional[list[Event]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def events(self) -> list[Event]:
        if self._events is None:
            self.__load_data()
        if self._events is None:
            raise ValueError()
        return self._events

    def __load_data(self) -> None:
        self._events = []
        if not configuration.DATA_EVENTS_DIR.is_dir():
            return
        for file_path in sorted(configuration.DATA_EVENTS_DIR.iterdir()):
            if file_path.suffix != ".yaml":
                continue
            raw_event = load(file_path.read_text(), Loader=Loader)
            if raw_event is not None:
                self._events.append(self.__convert_event_for_deserialization(raw_event))
        self._events.sort(key=lambda event: event["created"])

    def __save_data(self) -> None:
        configuration.DATA_EVENTS_DIR.mkdir(parents=True, exist_ok=True)

        # Write dirty entities
        for event in self.events:
            if event["id"] in self._dirty_ids:
                serializable_event = self.__convert_event_for_serialization(
                    deepcopy(event)
                )
                file_path = configuration.DATA_EVENTS_DIR / f"{event['id']}.yaml"
                file_path.write_text(dump(serializable_event, Dumper=Dumper))

        # Remove hard-deleted entity files
        for entity_id in self._deleted_ids:
            file_path = configuration.DATA_EVENTS_DIR / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._events is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        """Drop cached events so the next access reloads from disk."""
        self._events = None
        self.is_dirty = False
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def __convert_event_for_serialization(self, event: Event) -> dict[str, Any]:
        serializable_event = cast(dict[str, Any], event)
        serializable_event["date"] = time.datetime_to_iso_str(serializable_event["date"])
        serializable_event["created"] = time.datetime_to_iso_str(
            serializable_event["created"]
        )
        serializable_event["updated"] = time.datetime_to_iso_str(
            serializable_event["updated"]
        )
        return serializable_event

    def __convert_event_for_deserialization(self, event: dict[str, Any]) -> Event:
        event["date"] = time.datetime_from_str(event["date"])
        event["created"] = time.datetime_from_str(event["created"])
        event["updated"] = time.datetime_from_str(event["updated"])
        return cast(Event, event)

    def save_new_event(self, event: Event) -> EntityId:
        self.is_dirty = True
        self.events.append(event)
        self._dirty_ids.add(event["id"])
        return event["id"]

    def modify_event(
        self,
        id: EntityId,
        name: Optional[str] = None,
        date: Optional[pendulum.DateTime] = None,
        type: Optional[EventType] = None,
    ) -> None:
        self.is_dirty = True
        self._dirty_ids.add(id)

        event = [event for event in self.events if event["id"] == id][0]
        event["updated"] = time.now_utc()
        if name is not None:
            event["name"] = name
        if date is not None:
            event["date"] = date
        if type is not None:
            event["type"] = type

    def delete_event(self, id: EntityId) -> None:
        self.is_dirty = True
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)
        self._events = [event for event in self.events if event["id"] != id]

    def delete_events_for_project(self, project_id: EntityId) -> int:
        """Hard delete every event owned by a project.

        Returns:
            Number of events deleted
        """
        project_event_ids = [
            event["id"] for event in self.events if event["project_id"] == project_id
        ]
        for event_id in project_event_ids:
            self.delete_event(event_id)
        return len(project_event_ids)

    def get_all_events(self, project_id: Optional[EntityId] = None) -> list[Event]:
        if project_id is None:
            return deepcopy(self.events)
        return deepcopy(
            [event for event in self.events if event["project_id"] == project_id]
        )

    def find_event(self, id: EntityId) -> Optional[Event]:
        matching = [event for event in self.events if event["id"] == id]
        if len(matching) == 0:
            return None
        return deepcopy(matching[0])

    def find_deadline(self, project_id: EntityId) -> Optional[Event]:
        matching = [
            event
            for event in self.events
            if event["project_id"] == project_id and event["type"] == "deadline"
        ]
        if len(matching) == 0:
            return None
        return deepcopy(matching[0])


EVENT_REPO = EventRepository()
