"""Job execution types.

Public types:
- JobDataMap: Per-job parameter and state bag, owned by the host
- SchedulerContext: Scheduler-wide registry of named objects
- JobExecutionContext: Handle passed to a job for one invocation
- FileScanListener: Capability a file scan callback must provide
- Job: Anything with an ``execute(context)`` method

Errors:
- JobExecutionError: Base for failures raised out of ``Job.execute``
- ConfigurationError: Missing parameters or unresolvable listeners
- SchedulerError: The host could not supply what the job asked for
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Protocol, runtime_checkable


class SchedulerError(Exception):
    """Raised by a host that cannot serve a request from a running job."""


class JobExecutionError(Exception):
    """Failure raised by a job.

    ``retryable`` tells the host whether running the job again can help.
    Hosts should branch on the flag rather than on the exception type.
    """

    def __init__(self, message: str, *, retryable: bool = True) -> None:
        super().__init__(message)
        self.retryable = retryable


class ConfigurationError(JobExecutionError):
    """Job is misconfigured; retrying without a config change cannot help.

    ``kind`` is a stable error code, ``key`` the offending parameter or
    listener name.
    """

    def __init__(self, kind: str, key: str, message: str) -> None:
        super().__init__(message, retryable=False)
        self.kind = kind
        self.key = key


class JobDataMap(dict[str, Any]):
    """Mutable parameters plus state for one job instance.

    Writes are visible to the next invocation of the same job.
    """

    def get_string(self, key: str) -> str | None:
        value = self.get(key)
        if value is None:
            return None
        return str(value)

    def get_datetime(self, key: str) -> datetime | None:
        """Read a datetime, accepting ISO strings. Naive values are taken as UTC."""
        value = self.get(key)
        if value is None:
            return None
        if not isinstance(value, datetime):
            try:
                value = datetime.fromisoformat(str(value))
            except ValueError as e:
                raise ConfigurationError(
                    "invalid_parameter",
                    key,
                    f"Parameter '{key}' is not an ISO datetime: {value!r}",
                ) from e
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value


class SchedulerContext(dict[str, Any]):
    """Named objects shared by every job of a scheduler."""


class ContextProvider(Protocol):
    """What a job needs from its host."""

    def get_context(self) -> SchedulerContext: ...


@dataclass
class JobExecutionContext:
    """Everything one job invocation can see."""

    job_name: str
    job_data: JobDataMap
    scheduler: ContextProvider

    @property
    def scheduler_context(self) -> SchedulerContext:
        """Shared registry; raises SchedulerError if the host cannot supply it."""
        return self.scheduler.get_context()


@runtime_checkable
class FileScanListener(Protocol):
    """Receives notifications when a scanned file changes."""

    def file_updated(self, path: str) -> None:
        """Called with the scanned path after its modification time changed."""
        ...


@runtime_checkable
class Job(Protocol):
    """A unit of work the runner invokes on every poll."""

    def execute(self, context: JobExecutionContext) -> None: ...


# Plain callables can be wrapped into listeners (see filescan.listeners)
FileUpdatedCallback = Callable[[str], None]
