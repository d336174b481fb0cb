# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Literal, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "heatday"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"
DATA_PROJECTS_DIR: Path = DATA_PATH / "projects"
DATA_TASKS_DIR: Path = DATA_PATH / "tasks"
DATA_EVENTS_DIR: Path = DATA_PATH / "events"

CellStyle = Literal["alpha", "square"]
BucketMatch = Literal["start_day", "range"]


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    clear_ids_on_view: bool
    bucket_width_days: int
    min_cell_width: int
    max_cell_width: int
    label_column_width: int
    intensity_cap: int
    cell_style: CellStyle
    bucket_match: BucketMatch
    resize_debounce_ms: int


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "clear_ids_on_view": True,
        "bucket_width_days": 1,
        "min_cell_width": 2,
        "max_cell_width": 4,
        "label_column_width": 24,
        "intensity_cap": 10,
        "cell_style": "alpha",
        "bucket_match": "start_day",
        "resize_debounce_ms": 100,
    }


def set_data_path(data_path: Path) -> None:
    """Point every data file and directory at ``data_path``."""
    global DATA_PATH, DATA_ID_MAP_PATH, DATA_PROJECTS_DIR, DATA_TASKS_DIR, DATA_EVENTS_DIR

    DATA_PATH = data_path
    DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"
    DATA_PROJECTS_DIR = DATA_PATH / "projects"
    DATA_TASKS_DIR = DATA_PATH / "tasks"
    DATA_EVENTS_DIR = DATA_PATH / "events"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are used.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting))
