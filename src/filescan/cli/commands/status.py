"""Status command: show configured watches and their current state."""

from pathlib import Path
from typing import Annotated

import typer

from filescan.cli.console import console, warning


def register(app: typer.Typer) -> None:
    """Register the status command."""

    @app.command()
    def status(
        config: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="Path to configuration file",
            ),
        ] = None,
    ) -> None:
        """Show configured watches and their last modification time."""
        from rich.table import Table

        from filescan.cli.runtime import resolve_config
        from filescan.jobs import get_last_modified_time

        config_obj = resolve_config(config)
        if not config_obj.watches:
            warning("No watches configured")
            return

        table = Table(title="Watches")
        table.add_column("Name", style="cyan")
        table.add_column("Path")
        table.add_column("Listener")
        table.add_column("Modified", style="green")

        for watch in config_obj.watches:
            try:
                modified = get_last_modified_time(watch.path)
            except OSError as e:
                modified_str = f"[red]{e.strerror or e}[/red]"
            else:
                modified_str = (
                    modified.astimezone().strftime("%Y-%m-%d %H:%M:%S")
                    if modified
                    else "[yellow]missing[/yellow]"
                )
            table.add_row(watch.job_name, str(watch.path), watch.listener, modified_str)

        console.print(table)
