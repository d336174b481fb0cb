# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from heatday.model.entity_id import EntityId
from heatday.model.event import EVENT_TYPES, Event, EventType
from heatday.repository.event import EVENT_REPO
from heatday.repository.task import TASK_REPO
from heatday.service.error import (
    EntityNotFoundError,
    EntityValidationError,
    validate_name,
)
from heatday.service.project import get_project
from heatday.template.event import get_event_template

logger = logging.getLogger(__name__)

EVENT_NAME_MIN_LENGTH = 2
EVENT_NAME_MAX_LENGTH = 100


def validate_event_type(type: str) -> EventType:
    if type not in EVENT_TYPES:
        raise EntityValidationError(
            f"Event type must be one of {', '.join(EVENT_TYPES)}, got '{type}'"
        )
    return type  # type: ignore[return-value]


def validate_event_date(
    date: pendulum.DateTime,
    type: EventType,
    now: Optional[pendulum.DateTime] = None,
) -> pendulum.DateTime:
    """
    Reject event dates in the past.

    A date earlier than ``now`` is still accepted when it falls on today's
    calendar day, read in the time zone of ``now``, so date-only input for
    today is valid. A deadline must never fall on a day before today.
    """
    if now is None:
        now = pendulum.now("local")

    day = date.in_tz(now.timezone).date()
    if type == "deadline" and day < now.date():
        raise EntityValidationError("Deadlines must be set for today or a future date")
    if date < now and day != now.date():
        raise EntityValidationError("Date cannot be in the past")
    return date


def _ensure_no_other_deadline(
    project_id: EntityId, exclude_id: Optional[EntityId] = None
) -> None:
    existing = EVENT_REPO.find_deadline(project_id)
    if existing is not None and existing["id"] != exclude_id:
        raise EntityValidationError("Project can only have one deadline")


def get_event(id: EntityId) -> Event:
    event = EVENT_REPO.find_event(id)
    if event is None:
        raise EntityNotFoundError(f"Event {id} not found")
    return event


def create_event(
    project_id: EntityId,
    name: str,
    date: pendulum.DateTime,
    type: str,
    now: Optional[pendulum.DateTime] = None,
) -> Event:
    event_type = validate_event_type(type)
    event_name = validate_name("Event", name, EVENT_NAME_MIN_LENGTH, EVENT_NAME_MAX_LENGTH)
    validate_event_date(date, event_type, now)
    get_project(project_id)
    if event_type == "deadline":
        _ensure_no_other_deadline(project_id)

    event = get_event_template()
    event["project_id"] = project_id
    event["name"] = event_name
    event["date"] = date.in_tz("UTC")
    event["type"] = event_type

    id = EVENT_REPO.save_new_event(event)
    logger.debug("Created %s %s for project %s", event_type, id, project_id)
    return get_event(id)


def update_event(
    id: EntityId,
    name: Optional[str] = None,
    date: Optional[pendulum.DateTime] = None,
    type: Optional[str] = None,
    now: Optional[pendulum.DateTime] = None,
) -> Event:
    event = get_event(id)

    event_type = validate_event_type(type) if type is not None else None
    if name is not None:
        name = validate_name("Event", name, EVENT_NAME_MIN_LENGTH, EVENT_NAME_MAX_LENGTH)
    if date is not None:
        validate_event_date(date, event_type or event["type"], now)
        date = date.in_tz("UTC")
    if event_type == "deadline":
        _ensure_no_other_deadline(event["project_id"], exclude_id=id)

    EVENT_REPO.modify_event(id, name=name, date=date, type=event_type)
    return get_event(id)


def delete_event(id: EntityId) -> None:
    """Delete an event and detach the tasks that referenced it."""
    get_event(id)
    cleared = TASK_REPO.clear_event(id)
    EVENT_REPO.delete_event(id)
    logger.debug("Deleted event %s, detached %d tasks", id, cleared)
