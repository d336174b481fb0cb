# SPDX-License-Identifier: MIT

from heatday.model.entity_id import UNSET_ENTITY_ID, generate_entity_id
from heatday.model.entity_type import EntityType
from heatday.model.task import Task
from heatday.time import now_utc


def get_task_template() -> Task:
    now = now_utc()
    return {
        "id": generate_entity_id(),
        "entity_type": EntityType.TASK,
        "project_id": UNSET_ENTITY_ID,
        "event_id": None,
        "name": "",
        "completed": False,
        "created": now,
        "updated": now,
    }
