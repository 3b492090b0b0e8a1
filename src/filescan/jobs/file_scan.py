"""File scan job: notifies a listener when a path's mtime changes.

The job keeps the last observed modification time in its own data map and
compares it on every invocation. The first observation only establishes a
baseline. Invocations of one job instance must not overlap; the runner in
``filescan.scheduling`` guarantees this by running jobs sequentially.
"""

import logging
import stat
from datetime import UTC, datetime
from pathlib import Path

from filescan.jobs.types import (
    ConfigurationError,
    FileScanListener,
    JobExecutionContext,
    SchedulerError,
)

logger = logging.getLogger(__name__)

FILE_NAME = "FILE_NAME"
FILE_SCAN_LISTENER_NAME = "FILE_SCAN_LISTENER_NAME"
LAST_MODIFIED_TIME = "LAST_MODIFIED_TIME"


def get_last_modified_time(path: str | Path) -> datetime | None:
    """Get the modification time of a file or directory.

    Returns:
        The mtime as an aware UTC datetime, or None if the path is neither
        a regular file nor a directory.

    Raises:
        OSError: For failures other than the path not existing
            (e.g. permission denied on a parent directory).
    """
    try:
        st = Path(path).stat()
    except (FileNotFoundError, NotADirectoryError):
        return None
    if not (stat.S_ISREG(st.st_mode) or stat.S_ISDIR(st.st_mode)):
        return None
    return datetime.fromtimestamp(st.st_mtime, UTC)


class FileScanJob:
    """Compares a path's modification time against the last one seen.

    Parameters (in the job data map):
        FILE_NAME: Path of the file or directory to inspect.
        FILE_SCAN_LISTENER_NAME: Name of a FileScanListener registered
            in the scheduler context.

    The job stores LAST_MODIFIED_TIME back into the same map.
    """

    def execute(self, context: JobExecutionContext) -> None:
        data = context.job_data
        try:
            sched_ctx = context.scheduler_context
        except SchedulerError as e:
            raise ConfigurationError(
                "scheduler_context_unavailable",
                context.job_name,
                "Error obtaining scheduler context",
            ) from e

        file_name = data.get_string(FILE_NAME)
        listener_name = data.get_string(FILE_SCAN_LISTENER_NAME)

        if file_name is None:
            raise ConfigurationError(
                "missing_parameter",
                FILE_NAME,
                f"Required parameter '{FILE_NAME}' not found in job data",
            )
        if listener_name is None:
            raise ConfigurationError(
                "missing_parameter",
                FILE_SCAN_LISTENER_NAME,
                f"Required parameter '{FILE_SCAN_LISTENER_NAME}' not found in job data",
            )

        listener = self._resolve_listener(sched_ctx, listener_name)

        last_modified = data.get_datetime(LAST_MODIFIED_TIME)
        modified = get_last_modified_time(file_name)

        if modified is None:
            logger.warning(
                "file_scan_missing",
                extra={"file.path": file_name, "job.name": context.job_name},
            )
            return

        # Any difference counts, including a file replaced by an older one
        if last_modified is not None and modified != last_modified:
            logger.info(
                "file_updated",
                extra={
                    "file.path": file_name,
                    "file.previous_mtime": last_modified.isoformat(),
                    "file.mtime": modified.isoformat(),
                    "job.name": context.job_name,
                    "listener.name": listener_name,
                },
            )
            listener.file_updated(file_name)
        else:
            logger.debug(f"File '{file_name}' unchanged")

        data[LAST_MODIFIED_TIME] = modified

    def _resolve_listener(self, sched_ctx, listener_name: str) -> FileScanListener:
        listener = sched_ctx.get(listener_name)
        if listener is None:
            raise ConfigurationError(
                "listener_not_found",
                listener_name,
                f"FileScanListener named '{listener_name}' not found in scheduler context",
            )
        if not isinstance(listener, FileScanListener) or not callable(
            listener.file_updated
        ):
            raise ConfigurationError(
                "listener_invalid",
                listener_name,
                f"Object named '{listener_name}' is not a FileScanListener",
            )
        return listener
