"""Locate and remember the Noita save directory for NoitaEdit."""

from .config import ToolSettings
from .config_store import ConfigStore, KeyNotFoundError
from .resolver import ConsoleInputError, SavePathError, SavePathResolver, get_config_save_path

__all__ = [
    "ConfigStore",
    "ConsoleInputError",
    "KeyNotFoundError",
    "SavePathError",
    "SavePathResolver",
    "ToolSettings",
    "get_config_save_path",
]
