"""Shared test fixtures and factories."""

import logging
import os
from pathlib import Path

import pytest

from filescan.jobs import (
    FILE_NAME,
    FILE_SCAN_LISTENER_NAME,
    JobDataMap,
    JobExecutionContext,
    SchedulerContext,
    SchedulerError,
)

# =============================================================================
# Job Fixtures
# =============================================================================


class RecordingListener:
    """Listener that remembers every path it was notified about."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def file_updated(self, path: str) -> None:
        self.calls.append(path)


class StaticScheduler:
    """Minimal host handing out a fixed scheduler context."""

    def __init__(self, context: SchedulerContext | None = None) -> None:
        self.context = context if context is not None else SchedulerContext()
        self.available = True

    def get_context(self) -> SchedulerContext:
        if not self.available:
            raise SchedulerError("scheduler unavailable")
        return self.context


def set_mtime(path: Path, timestamp: float) -> None:
    """Set both atime and mtime of a path."""
    os.utime(path, (timestamp, timestamp))


def make_job_data(path: Path | str, listener_name: str = "recorder") -> JobDataMap:
    return JobDataMap({FILE_NAME: str(path), FILE_SCAN_LISTENER_NAME: listener_name})


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()


@pytest.fixture
def scheduler(listener: RecordingListener) -> StaticScheduler:
    return StaticScheduler(SchedulerContext({"recorder": listener}))


@pytest.fixture
def make_context(scheduler: StaticScheduler):
    """Factory for execution contexts sharing the fixture scheduler."""

    def factory(data: JobDataMap, job_name: str = "scan") -> JobExecutionContext:
        return JobExecutionContext(job_name=job_name, job_data=data, scheduler=scheduler)

    return factory


@pytest.fixture
def watched_file(tmp_path: Path) -> Path:
    path = tmp_path / "watched.txt"
    path.write_text("v1")
    set_mtime(path, 1_700_000_000)
    return path


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def config_toml_content(tmp_path: Path) -> str:
    return f"""
poll_interval = 2.5

[logging]
level = "DEBUG"

[[watches]]
path = "{tmp_path / "watched.txt"}"
listener = "log"
name = "watched"

[[watches]]
path = "{tmp_path / "missing.txt"}"
"""


@pytest.fixture
def config_file(tmp_path: Path, config_toml_content: str) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(config_toml_content)
    return path


# =============================================================================
# Logging / CLI Test Helpers
# =============================================================================


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging() calls made by a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


@pytest.fixture
def cli_runner():
    """Create a Typer CLI test runner with colors disabled and a wide console."""
    from typer.testing import CliRunner

    from filescan.cli.console import console

    width = console._width
    console.width = 200
    yield CliRunner(env={"NO_COLOR": "1"})
    console._width = width


@pytest.fixture
def filescan_home(tmp_path: Path, monkeypatch) -> Path:
    """Point FILESCAN_HOME at an empty directory and run from tmp_path."""
    from filescan.config.paths import get_filescan_home

    home = tmp_path / "home"
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("FILESCAN_HOME", str(home))
    get_filescan_home.cache_clear()
    yield home
    get_filescan_home.cache_clear()
