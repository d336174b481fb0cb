# SPDX-License-Identifier: MIT

from heatday.model.entity_id import UNSET_ENTITY_ID, generate_entity_id
from heatday.model.entity_type import EntityType
from heatday.model.event import Event
from heatday.time import now_utc


def get_event_template() -> Event:
    now = now_utc()
    return {
        "id": generate_entity_id(),
        "entity_type": EntityType.EVENT,
        "project_id": UNSET_ENTITY_ID,
        "name": "",
        "date": now,
        "type": "milestone",
        "created": now,
        "updated": now,
    }
