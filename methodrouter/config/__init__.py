"""Configuration module for methodrouter."""

from methodrouter.config.loader import load_settings, save_settings, get_config_path
from methodrouter.config.schema import RouterSettings
from methodrouter.config.access import get_settings, clear_settings_cache

__all__ = [
    "RouterSettings",
    "load_settings",
    "save_settings",
    "get_config_path",
    "get_settings",
    "clear_settings_cache",
]
