# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "kalendar"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_EVENTS_DIR: Path = DATA_PATH / "events"
DATA_ID_MAP_PATH: Path = DATA_PATH / "id_map.yaml"


class Configuration(TypedDict):
    show_header: bool
    max_visible_per_cell: int
    random_color_for_events: bool
    default_event_color: str
    data_path: Optional[str]
    clear_ids_on_view: bool
    log_level: NotRequired[str]


def get_default_configuration() -> Configuration:
    return {
        "show_header": True,
        "max_visible_per_cell": 3,
        "random_color_for_events": False,
        "default_event_color": "#FFCBE1",
        "data_path": None,
        "clear_ids_on_view": True,
        "log_level": "WARNING",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_EVENTS_DIR, DATA_ID_MAP_PATH

    DATA_PATH = data_path
    DATA_EVENTS_DIR = DATA_PATH / "events"
    DATA_ID_MAP_PATH = DATA_PATH / "id_map.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are read.
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
