# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from heatday.color import get_random_color, normalize_hex_color
from heatday.model.entity_id import EntityId
from heatday.model.project import MoveDirection, Project
from heatday.repository.event import EVENT_REPO
from heatday.repository.project import PROJECT_REPO
from heatday.repository.task import TASK_REPO
from heatday.service.error import (
    EntityNotFoundError,
    EntityValidationError,
    validate_name,
)
from heatday.template.project import get_project_template

logger = logging.getLogger(__name__)

PROJECT_NAME_MIN_LENGTH = 2
PROJECT_NAME_MAX_LENGTH = 50


def validate_project_color(color: str) -> str:
    try:
        return normalize_hex_color(color)
    except ValueError as e:
        raise EntityValidationError(str(e)) from e


def get_project(id: EntityId) -> Project:
    project = PROJECT_REPO.find_project(id)
    if project is None:
        raise EntityNotFoundError(f"Project {id} not found")
    return project


def create_project(name: str, color: Optional[str] = None) -> Project:
    """Create a project at the end of the display order."""
    project = get_project_template()
    project["name"] = validate_name(
        "Project", name, PROJECT_NAME_MIN_LENGTH, PROJECT_NAME_MAX_LENGTH
    )
    project["color"] = validate_project_color(
        color if color is not None else get_random_color()
    )
    project["order"] = len(PROJECT_REPO.get_all_projects())

    id = PROJECT_REPO.save_new_project(project)
    logger.debug("Created project %s at order %d", id, project["order"])
    return get_project(id)


def update_project(
    id: EntityId,
    name: Optional[str] = None,
    color: Optional[str] = None,
    hidden: Optional[bool] = None,
    collapsed: Optional[bool] = None,
    order: Optional[int] = None,
) -> Project:
    """
    Apply a partial patch to a project.

    Setting ``order`` directly does not re-rank other projects; the caller is
    responsible for keeping the orders a permutation. Use move_project to
    reorder safely.
    """
    get_project(id)

    if name is not None:
        name = validate_name(
            "Project", name, PROJECT_NAME_MIN_LENGTH, PROJECT_NAME_MAX_LENGTH
        )
    if color is not None:
        color = validate_project_color(color)
    if order is not None and order < 0:
        raise EntityValidationError(f"Project order must be >= 0, got {order}")

    PROJECT_REPO.modify_project(
        id,
        name=name,
        color=color,
        hidden=hidden,
        collapsed=collapsed,
        order=order,
    )
    return get_project(id)


def delete_project(id: EntityId) -> None:
    """Delete a project with its tasks and events, then close the order gap."""
    project = get_project(id)

    deleted_tasks = TASK_REPO.delete_tasks_for_project(id)
    deleted_events = EVENT_REPO.delete_events_for_project(id)
    PROJECT_REPO.delete_project(id)
    logger.debug(
        "Deleted project %s with %d tasks and %d events",
        id,
        deleted_tasks,
        deleted_events,
    )

    for remaining in PROJECT_REPO.get_all_projects():
        if remaining["order"] > project["order"]:
            PROJECT_REPO.modify_project(remaining["id"], order=remaining["order"] - 1)


def move_project(id: EntityId, direction: MoveDirection) -> bool:
    """
    Swap a project's order with its neighbour.

    Moving up swaps with the project holding order - 1, moving down with the
    one holding order + 1. When no project holds that order nothing changes.

    Returns:
        True if the orders were swapped
    """
    project = get_project(id)
    current_order = project["order"]
    new_order = current_order - 1 if direction == "up" else current_order + 1

    target = PROJECT_REPO.find_project_by_order(new_order)
    if target is None:
        return False

    PROJECT_REPO.modify_project(id, order=new_order)
    PROJECT_REPO.modify_project(target["id"], order=current_order)
    logger.debug("Swapped project %s with %s", id, target["id"])
    return True
