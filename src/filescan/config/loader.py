"""Configuration loading from TOML files."""

import tomllib
from pathlib import Path

from filescan.config.models import ConfigError, FileScanConfig
from filescan.config.paths import get_config_path


def _get_default_config_paths() -> list[Path]:
    """Get ordered list of default config file locations."""
    return [
        Path("filescan.toml"),  # Current directory
        get_config_path(),  # ~/.filescan/config.toml (or FILESCAN_HOME)
        Path("/etc/filescan/config.toml"),  # System-wide
    ]


def load_config(path: Path | None = None) -> FileScanConfig:
    """Load configuration from TOML file.

    Args:
        path: Explicit path to config file. If None, searches default locations.

    Returns:
        Validated FileScanConfig instance.

    Raises:
        FileNotFoundError: If no config file is found.
        ConfigError: If the file is not valid TOML.
        pydantic.ValidationError: If the contents do not validate.
    """
    config_path: Path | None = None

    default_paths = _get_default_config_paths()

    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        for default_path in default_paths:
            expanded = default_path.expanduser()
            if expanded.exists():
                config_path = expanded
                break

    if config_path is None:
        raise FileNotFoundError(
            f"No config file found. Searched: {', '.join(str(p) for p in default_paths)}"
        )

    try:
        with config_path.open("rb") as f:
            raw_config = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    return FileScanConfig.model_validate(raw_config)


def get_default_config() -> FileScanConfig:
    """Get an empty configuration for ad-hoc runs and testing."""
    return FileScanConfig()
