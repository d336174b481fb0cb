# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from heatday.model.entity_id import EntityId
from heatday.model.task import Task
from heatday.repository.event import EVENT_REPO
from heatday.repository.task import TASK_REPO
from heatday.service.error import (
    EntityNotFoundError,
    EntityValidationError,
    validate_name,
)
from heatday.service.project import get_project
from heatday.template.task import get_task_template

logger = logging.getLogger(__name__)

TASK_NAME_MIN_LENGTH = 2
TASK_NAME_MAX_LENGTH = 200


def _ensure_event_in_project(event_id: EntityId, project_id: EntityId) -> None:
    event = EVENT_REPO.find_event(event_id)
    if event is None or event["project_id"] != project_id:
        raise EntityValidationError(
            "Event not found or does not belong to the task's project"
        )


def get_task(id: EntityId) -> Task:
    task = TASK_REPO.find_task(id)
    if task is None:
        raise EntityNotFoundError(f"Task {id} not found")
    return task


def create_task(
    project_id: EntityId, name: str, event_id: Optional[EntityId] = None
) -> Task:
    task_name = validate_name("Task", name, TASK_NAME_MIN_LENGTH, TASK_NAME_MAX_LENGTH)
    get_project(project_id)
    if event_id is not None:
        _ensure_event_in_project(event_id, project_id)

    task = get_task_template()
    task["project_id"] = project_id
    task["event_id"] = event_id
    task["name"] = task_name

    id = TASK_REPO.save_new_task(task)
    logger.debug("Created task %s for project %s", id, project_id)
    return get_task(id)


def update_task(
    id: EntityId,
    name: Optional[str] = None,
    completed: Optional[bool] = None,
    event_id: Optional[EntityId] = None,
    remove_event_id: bool = False,
) -> Task:
    task = get_task(id)

    if name is not None:
        name = validate_name("Task", name, TASK_NAME_MIN_LENGTH, TASK_NAME_MAX_LENGTH)
    if event_id is not None:
        _ensure_event_in_project(event_id, task["project_id"])

    TASK_REPO.modify_task(
        id,
        name=name,
        completed=completed,
        event_id=event_id,
        remove_event_id=remove_event_id,
    )
    return get_task(id)


def delete_task(id: EntityId) -> None:
    get_task(id)
    TASK_REPO.delete_task(id)
    logger.debug("Deleted task %s", id)
