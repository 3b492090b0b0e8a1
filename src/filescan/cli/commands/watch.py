"""Watch command: poll paths and notify listeners on change."""

from pathlib import Path
from typing import Annotated

import typer

from filescan.cli.console import console, dim, error


def register(app: typer.Typer) -> None:
    """Register the watch command."""

    @app.command()
    def watch(
        paths: Annotated[
            list[Path] | None,
            typer.Argument(help="Files or directories to watch"),
        ] = None,
        config: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="Path to configuration file",
            ),
        ] = None,
        interval: Annotated[
            float | None,
            typer.Option(
                "--interval",
                "-i",
                min=0.01,
                help="Seconds between polls (default: from config)",
            ),
        ] = None,
        listener: Annotated[
            str,
            typer.Option(
                "--listener",
                "-l",
                help="Listener for paths given on the command line",
            ),
        ] = "console",
        count: Annotated[
            int,
            typer.Option(
                "--count",
                "-n",
                min=0,
                help="Stop after this many polls (0 = run until interrupted)",
            ),
        ] = 0,
        verbose: Annotated[
            bool,
            typer.Option(
                "--verbose",
                "-v",
                help="Enable debug logging",
            ),
        ] = False,
    ) -> None:
        """Watch files and directories for modification time changes.

        Examples:
            filescan watch app.toml                  # Print when app.toml changes
            filescan watch -c filescan.toml          # Watch everything configured
            filescan watch data/ -l log -i 30        # Log directory changes every 30s
        """
        import asyncio

        from filescan.cli.runtime import build_runner, merge_watches, resolve_config
        from filescan.logging import configure_logging

        config_obj = resolve_config(config)
        configure_logging(
            level="DEBUG" if verbose else config_obj.logging.level,
            use_rich=True,
            log_to_file=config_obj.logging.log_to_file,
            retention_days=config_obj.logging.retention_days,
        )

        watches = merge_watches(config_obj, paths or [], listener)
        if not watches:
            error("Nothing to watch: pass paths or add watches to the config file")
            raise typer.Exit(1)

        poll_interval = interval if interval is not None else config_obj.poll_interval
        runner = build_runner(watches, poll_interval)

        dim(f"Watching {len(watches)} path(s) every {poll_interval:g}s")
        try:
            asyncio.run(runner.run(max_polls=count or None))
        except KeyboardInterrupt:
            console.print()
        finally:
            runner.shutdown()

        disabled = [d for d in runner.jobs if not d.enabled]
        for detail in disabled:
            error(f"{detail.name}: {detail.last_error}")
        if disabled and len(disabled) == len(runner.jobs):
            raise typer.Exit(1)
