# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

import pendulum

from heatday.model.entity_id import EntityId

MoveDirection = Literal["up", "down"]


class Project(TypedDict):
    id: EntityId
    entity_type: str
    name: str
    color: str
    hidden: bool
    collapsed: bool
    order: int
    created: pendulum.DateTime
    updated: pendulum.DateTime
