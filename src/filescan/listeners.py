"""Built-in FileScanListener implementations."""

import logging
from datetime import UTC, datetime

from rich.console import Console

from filescan.jobs.types import FileUpdatedCallback, SchedulerContext

logger = logging.getLogger(__name__)

LOG_LISTENER = "log"
CONSOLE_LISTENER = "console"


class LoggingListener:
    """Logs every update at INFO level."""

    def __init__(self, name: str = LOG_LISTENER) -> None:
        self.name = name

    def file_updated(self, path: str) -> None:
        logger.info(
            "listener_file_updated",
            extra={"file.path": path, "listener.name": self.name},
        )


class ConsoleListener:
    """Prints updates to the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def file_updated(self, path: str) -> None:
        now = datetime.now(UTC).astimezone().strftime("%H:%M:%S")
        self._console.print(f"[dim]{now}[/dim] [green]updated[/green] {path}")


class CallbackListener:
    """Adapts a plain ``(path) -> None`` callable to the listener protocol."""

    def __init__(self, callback: FileUpdatedCallback) -> None:
        self._callback = callback

    def file_updated(self, path: str) -> None:
        self._callback(path)


def register_builtin_listeners(
    context: SchedulerContext, console: Console | None = None
) -> None:
    """Register the built-in listeners under their default names.

    Existing entries are left alone so callers can override a built-in.
    """
    context.setdefault(LOG_LISTENER, LoggingListener())
    context.setdefault(CONSOLE_LISTENER, ConsoleListener(console))
