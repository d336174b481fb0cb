# SPDX-License-Identifier: MIT

import uuid

# Entity ids double as the YAML file names under the data directory
type EntityId = str

# Parent reference of a template that has not been attached to a project yet
UNSET_ENTITY_ID: EntityId = ""


def generate_entity_id() -> EntityId:
    return uuid.uuid4().hex
