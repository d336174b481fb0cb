# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from heatday.model.entity_id import EntityId


class Task(TypedDict):
    id: EntityId
    entity_type: str
    project_id: EntityId
    event_id: Optional[EntityId]
    name: str
    completed: bool
    created: pendulum.DateTime
    updated: pendulum.DateTime
