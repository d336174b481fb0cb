# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from heatday import configuration
from heatday import state as app_state
from heatday.repository.configuration import CONFIGURATION_REPO
from heatday.template.id_map import get_id_map_template
from heatday.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    __ensure_config_files()
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    view_state.set_show_header(config["show_header"])
    app_state.set_clear_ids(config["clear_ids_on_view"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))


def __ensure_data_files() -> None:
    if not configuration.DATA_ID_MAP_PATH.is_file():
        configuration.DATA_ID_MAP_PATH.write_text(
            dump(get_id_map_template(), Dumper=Dumper)
        )

    # Directory-based entity stores (one file per entity)
    for entity_dir in (
        configuration.DATA_PROJECTS_DIR,
        configuration.DATA_TASKS_DIR,
        configuration.DATA_EVENTS_DIR,
    ):
        entity_dir.mkdir(parents=True, exist_ok=True)
