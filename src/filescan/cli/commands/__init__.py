"""CLI command modules."""

from filescan.cli.commands import config, status, watch

__all__ = [
    "config",
    "status",
    "watch",
]
