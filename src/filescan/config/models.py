"""Configuration models using Pydantic."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from filescan.listeners import LOG_LISTENER


class ConfigError(Exception):
    """Configuration error."""

    pass


class WatchConfig(BaseModel):
    """A single path to watch.

    ``listener`` names an entry in the scheduler context; the built-ins are
    "log" and "console".
    """

    path: Path
    listener: str = LOG_LISTENER
    name: str | None = None

    @property
    def job_name(self) -> str:
        return self.name or str(self.path)


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    # None = FILESCAN_LOG_LEVEL env var, then INFO
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None
    log_to_file: bool = False
    retention_days: int = Field(default=7, ge=1)


class FileScanConfig(BaseModel):
    """Root configuration model."""

    poll_interval: float = Field(default=5.0, gt=0)
    watches: list[WatchConfig] = []
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def _unique_job_names(self) -> "FileScanConfig":
        seen: set[str] = set()
        for watch in self.watches:
            if watch.job_name in seen:
                raise ValueError(f"Duplicate watch name: {watch.job_name}")
            seen.add(watch.job_name)
        return self
