"""Shared runtime bootstrap helpers for CLI entrypoints."""

from __future__ import annotations

from pathlib import Path

import typer
from pydantic import ValidationError

from filescan.cli.console import console, error
from filescan.config import (
    ConfigError,
    FileScanConfig,
    WatchConfig,
    get_default_config,
    load_config,
)
from filescan.jobs import FileScanJob
from filescan.listeners import register_builtin_listeners
from filescan.scheduling import JobRunner, file_scan_job_data


def resolve_config(path: Path | None, *, required: bool = False) -> FileScanConfig:
    """Load the config, exiting with status 1 on errors.

    Without an explicit path a missing config file is fine unless
    ``required`` is set; the defaults are used instead.
    """
    try:
        return load_config(path)
    except FileNotFoundError as e:
        if path is None and not required:
            return get_default_config()
        error(str(e))
        raise typer.Exit(1) from None
    except ConfigError as e:
        error(str(e))
        raise typer.Exit(1) from None
    except ValidationError as e:
        error("Configuration validation failed:")
        for err in e.errors():
            loc = ".".join(str(x) for x in err["loc"])
            console.print(f"  [yellow]{loc}[/yellow]: {err['msg']}")
        raise typer.Exit(1) from None


def merge_watches(
    config: FileScanConfig, paths: list[Path], listener: str
) -> list[WatchConfig]:
    """Configured watches followed by ad-hoc paths not already configured."""
    watches = list(config.watches)
    known = {w.job_name for w in watches}
    for path in paths:
        watch = WatchConfig(path=path, listener=listener)
        if watch.job_name in known:
            continue
        known.add(watch.job_name)
        watches.append(watch)
    return watches


def build_runner(
    watches: list[WatchConfig], poll_interval: float
) -> JobRunner:
    """Create a runner with built-in listeners and one FileScanJob per watch."""
    runner = JobRunner(poll_interval=poll_interval)
    register_builtin_listeners(runner.context, console=console)
    for watch in watches:
        runner.add_job(
            watch.job_name,
            FileScanJob(),
            file_scan_job_data(str(watch.path), watch.listener),
        )
    return runner
