# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict

from heatday.model.entity_id import EntityId

EntityType = Literal["projects", "tasks", "events"]


type IdMapDict = dict[EntityType, IdMapMapping]


class IdMap(TypedDict):
    """
    All dictionaries are mapped in the following way:

    Synthetic id : real entity id.

    The synthetic id is the short number printed by list views. Index into
    ``synthetic_to_real`` with it to get the entity's uuid back.

    Example:

    Project with an id of "9b1c...".
    Synthetic id for that project is 3.

    real_project_id = id_map["projects"]["synthetic_to_real"][3] # returns "9b1c..."
    """

    projects: "IdMapMapping"
    tasks: "IdMapMapping"
    events: "IdMapMapping"


class IdMapMapping(TypedDict):
    synthetic_to_real: dict[int, EntityId]
    real_to_synthetic: dict[EntityId, int]
