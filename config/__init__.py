"""Configuration module."""

from config.logging import get_logger, setup_logging
from config.paths import config_dir, config_path, user_config_dir, user_home_dir
from config.settings import Settings, load_settings, settings

__all__ = [
    "Settings",
    "settings",
    "load_settings",
    "setup_logging",
    "get_logger",
    "config_dir",
    "config_path",
    "user_config_dir",
    "user_home_dir",
]
