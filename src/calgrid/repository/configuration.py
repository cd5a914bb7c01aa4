# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from calgrid import configuration


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
        if not configuration.APP_CONFIG_PATH.is_file():
            self._config = configuration.default_configuration()
            return

        self._config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)

        if self._config is None:
            raise ValueError(f"Empty configuration file {configuration.APP_CONFIG_PATH}")

        # Migration: fill in settings added after the file was written
        for key, value in configuration.default_configuration().items():
            if key not in self._config:
                self._config[key] = value  # type: ignore[literal-required]

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        timezone: Optional[str] = None,
        week_start: Optional[str] = None,
        hour_height: Optional[float] = None,
        min_block_height: Optional[float] = None,
        palette: Optional[list[str]] = None,
        default_color: Optional[str] = None,
        show_header: Optional[bool] = None,
        events_path: Optional[str] = None,
        remove_events_path: bool = False,
        log_file: Optional[str] = None,
        remove_log_file: bool = False,
    ) -> None:
        self.is_dirty = True

        if timezone is not None:
            self.config["timezone"] = timezone
        if week_start is not None:
            self.config["week_start"] = week_start
        if hour_height is not None:
            self.config["hour_height"] = hour_height
        if min_block_height is not None:
            self.config["min_block_height"] = min_block_height
        if palette is not None:
            self.config["palette"] = palette
        if default_color is not None:
            self.config["default_color"] = default_color
        if show_header is not None:
            self.config["show_header"] = show_header
        if events_path is not None:
            self.config["events_path"] = events_path
        if remove_events_path:
            self.config["events_path"] = None
        if log_file is not None:
            self.config["log_file"] = log_file
        if remove_log_file:
            self.config["log_file"] = None

    def reset(self) -> None:
        """Drop the cached configuration so the next access reloads it."""
        self._config = None
        self.is_dirty = False


CONFIGURATION_REPO = ConfigurationRepository()
