"""Main CLI application."""

import typer

from filescan.cli.commands import config, status, watch

app = typer.Typer(
    name="filescan",
    help="filescan - notify listeners when files change",
    no_args_is_help=True,
)

watch.register(app)
status.register(app)
config.register(app)


if __name__ == "__main__":
    app()
