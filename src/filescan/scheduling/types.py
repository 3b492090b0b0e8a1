"""Runner types.

Public types:
- JobDetail: A registered job plus its data map and run bookkeeping
- JobResult: Outcome of a single job invocation
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum

from filescan.jobs.file_scan import FILE_NAME, FILE_SCAN_LISTENER_NAME
from filescan.jobs.types import Job, JobDataMap


class JobStatus(Enum):
    """Outcome of a job invocation."""

    OK = "ok"
    FAILED = "failed"
    DISABLED = "disabled"


@dataclass
class JobDetail:
    """A job registered with the runner."""

    name: str
    job: Job
    data: JobDataMap = field(default_factory=JobDataMap)
    enabled: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    # Internal tracking
    run_count: int = 0
    last_run: datetime | None = None
    last_error: str | None = None


@dataclass
class JobResult:
    """Outcome of one invocation.

    ``status`` is DISABLED when the invocation failed with a
    non-retryable error and the runner switched the job off.
    """

    job_name: str
    status: JobStatus
    error: BaseException | None = None
    finished_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def ok(self) -> bool:
        return self.status is JobStatus.OK


def file_scan_job_data(path: str, listener_name: str) -> JobDataMap:
    """Build the data map a FileScanJob expects."""
    return JobDataMap({FILE_NAME: path, FILE_SCAN_LISTENER_NAME: listener_name})
