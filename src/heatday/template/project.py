# SPDX-License-Identifier: MIT

from heatday.model.entity_id import generate_entity_id
from heatday.model.entity_type import EntityType
from heatday.model.project import Project
from heatday.time import now_utc


def get_project_template() -> Project:
    now = now_utc()
    return {
        "id": generate_entity_id(),
        "entity_type": EntityType.PROJECT,
        "name": "",
        "color": "#3b82f6",
        "hidden": False,
        "collapsed": False,
        "order": 0,
        "created": now,
        "updated": now,
    }
