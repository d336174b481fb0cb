# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from heatday import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded = None
        if configuration.APP_CONFIG_PATH.is_file():
            loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        # Migration: fill in any setting added since the file was written
        config = configuration.get_default_configuration()
        if loaded is not None:
            config.update(loaded)
        self._config = cast(configuration.Configuration, config)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        show_header: Optional[bool] = None,
        clear_ids_on_view: Optional[bool] = None,
        bucket_width_days: Optional[int] = None,
        min_cell_width: Optional[int] = None,
        max_cell_width: Optional[int] = None,
        label_column_width: Optional[int] = None,
        intensity_cap: Optional[int] = None,
        cell_style: Optional[configuration.CellStyle] = None,
        bucket_match: Optional[configuration.BucketMatch] = None,
        resize_debounce_ms: Optional[int] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
    ) -> None:
        self.is_dirty = True

        if show_header is not None:
            self.config["show_header"] = show_header
        if clear_ids_on_view is not None:
            self.config["clear_ids_on_view"] = clear_ids_on_view
        if bucket_width_days is not None:
            self.config["bucket_width_days"] = bucket_width_days
        if min_cell_width is not None:
            self.config["min_cell_width"] = min_cell_width
        if max_cell_width is not None:
            self.config["max_cell_width"] = max_cell_width
        if label_column_width is not None:
            self.config["label_column_width"] = label_column_width
        if intensity_cap is not None:
            self.config["intensity_cap"] = intensity_cap
        if cell_style is not None:
            self.config["cell_style"] = cell_style
        if bucket_match is not None:
            self.config["bucket_match"] = bucket_match
        if resize_debounce_ms is not None:
            self.config["resize_debounce_ms"] = resize_debounce_ms
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None


CONFIGURATION_REPO = ConfigurationRepository()
