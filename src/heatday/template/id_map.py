# SPDX-License-Identifier: MIT

from heatday.model.id_map import IdMap


def get_id_map_template() -> IdMap:
    return {
        "projects": {"synthetic_to_real": {}, "real_to_synthetic": {}},
        "tasks": {"synthetic_to_real": {}, "real_to_synthetic": {}},
        "events": {"synthetic_to_real": {}, "real_to_synthetic": {}},
    }
