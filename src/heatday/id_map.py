# SPDX-License-Identifier: MIT

from heatday import state as app_state
from heatday.model.id_map import EntityType
from heatday.repository.id_map import ID_MAP_REPO


def clear_id_map_if_required(entity_type: EntityType) -> None:
    if app_state.get_clear_ids():
        ID_MAP_REPO.clear_ids(entity_type)
