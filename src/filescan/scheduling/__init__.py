"""Scheduling subsystem — runs jobs on a polling loop.

Public API:
- JobRunner: Owns job data maps and the scheduler context, polls jobs

Types:
- JobDetail: A registered job and its state
- JobResult, JobStatus: Outcome of a single invocation
"""

from filescan.scheduling.runner import JobRunner
from filescan.scheduling.types import (
    JobDetail,
    JobResult,
    JobStatus,
    file_scan_job_data,
)

__all__ = [
    "JobDetail",
    "JobResult",
    "JobRunner",
    "JobStatus",
    "file_scan_job_data",
]
