# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

import pendulum

from heatday.model.entity_id import EntityId

EventType = Literal["milestone", "deadline"]

EVENT_TYPES: tuple[EventType, ...] = ("milestone", "deadline")


class Event(TypedDict):
    id: EntityId
    entity_type: str
    project_id: EntityId
    name: str
    date: pendulum.DateTime
    type: EventType
    created: pendulum.DateTime
    updated: pendulum.DateTime
