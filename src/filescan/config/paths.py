"""Centralized path management for filescan.

All state (config, logs) is stored under a single base directory.
The base directory can be overridden with the FILESCAN_HOME environment
variable.

Default locations:
- Linux/macOS: ~/.filescan
- Windows: %USERPROFILE%\\.filescan
"""

import os
from functools import lru_cache
from pathlib import Path

ENV_VAR = "FILESCAN_HOME"


@lru_cache(maxsize=1)
def get_filescan_home() -> Path:
    """Get the base directory for all filescan data.

    Resolution order:
    1. FILESCAN_HOME environment variable (if set)
    2. Platform default (~/.filescan)
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser().resolve()
    return Path.home() / ".filescan"


def get_config_path() -> Path:
    """Get the default config file path."""
    return get_filescan_home() / "config.toml"


def get_logs_path() -> Path:
    """Get the JSONL log directory."""
    return get_filescan_home() / "logs"
