"""Jobs invoked by the scheduling runner.

Public API:
- FileScanJob: Notifies a listener when a path's modification time changes
- get_last_modified_time: mtime of a file or directory, None if missing

Types:
- JobDataMap, SchedulerContext, JobExecutionContext
- FileScanListener: Capability required of file scan callbacks
- JobExecutionError, ConfigurationError, SchedulerError
"""

from filescan.jobs.file_scan import (
    FILE_NAME,
    FILE_SCAN_LISTENER_NAME,
    LAST_MODIFIED_TIME,
    FileScanJob,
    get_last_modified_time,
)
from filescan.jobs.types import (
    ConfigurationError,
    FileScanListener,
    Job,
    JobDataMap,
    JobExecutionContext,
    JobExecutionError,
    SchedulerContext,
    SchedulerError,
)

__all__ = [
    "FILE_NAME",
    "FILE_SCAN_LISTENER_NAME",
    "LAST_MODIFIED_TIME",
    "ConfigurationError",
    "FileScanJob",
    "FileScanListener",
    "Job",
    "JobDataMap",
    "JobExecutionContext",
    "JobExecutionError",
    "SchedulerContext",
    "SchedulerError",
    "get_last_modified_time",
]
