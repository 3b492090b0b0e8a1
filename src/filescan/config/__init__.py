"""Configuration module."""

from filescan.config.loader import get_default_config, load_config
from filescan.config.models import (
    ConfigError,
    FileScanConfig,
    LoggingConfig,
    WatchConfig,
)
from filescan.config.paths import get_config_path, get_filescan_home, get_logs_path

__all__ = [
    "ConfigError",
    "FileScanConfig",
    "LoggingConfig",
    "WatchConfig",
    "get_config_path",
    "get_default_config",
    "get_filescan_home",
    "get_logs_path",
    "load_config",
]
