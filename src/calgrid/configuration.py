# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

from calgrid.color import DEFAULT_COLOR, GROUP_PALETTE

APP_NAME = "calgrid"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_EVENTS_PATH: Path = DATA_PATH / "events.yaml"


class Configuration(TypedDict):
    timezone: str
    week_start: str
    hour_height: float
    min_block_height: float
    palette: list[str]
    default_color: str
    show_header: bool
    events_path: Optional[str]
    log_file: NotRequired[Optional[str]]


def default_configuration() -> Configuration:
    return {
        "timezone": "local",
        "week_start": "monday",
        "hour_height": 50.0,
        "min_block_height": 22.0,
        "palette": list(GROUP_PALETTE),
        "default_color": DEFAULT_COLOR,
        "show_header": True,
        "events_path": None,
        "log_file": None,
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA paths dynamically.

    This must be called after the config file exists and before the event
    repository is used.
    """
    global DATA_PATH, DATA_EVENTS_PATH

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    events_path_setting = config.get("events_path")
    if events_path_setting is not None:
        DATA_EVENTS_PATH = Path(events_path_setting).expanduser()
        DATA_PATH = DATA_EVENTS_PATH.parent
