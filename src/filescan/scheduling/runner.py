"""Job runner — polls registered jobs on a fixed interval.

The runner owns each job's data map and the shared scheduler context.
Jobs run one after another inside a single poll, so invocations of the
same job never overlap.
"""

import asyncio
import logging
from datetime import UTC, datetime

from filescan.jobs.types import (
    Job,
    JobDataMap,
    JobExecutionContext,
    JobExecutionError,
    SchedulerContext,
    SchedulerError,
)
from filescan.scheduling.types import JobDetail, JobResult, JobStatus

logger = logging.getLogger(__name__)


class JobRunner:
    """Runs registered jobs every ``poll_interval`` seconds.

    Example:
        runner = JobRunner(poll_interval=2.0)
        runner.context["log"] = LoggingListener()
        runner.add_job(
            "config", FileScanJob(), file_scan_job_data("app.toml", "log")
        )

        await runner.start()
    """

    def __init__(
        self,
        poll_interval: float = 5.0,
        context: SchedulerContext | None = None,
    ):
        self._poll_interval = poll_interval
        self._context = context if context is not None else SchedulerContext()
        self._jobs: dict[str, JobDetail] = {}
        self._running = False
        self._shutdown = False
        self._task: asyncio.Task | None = None
        self._poll_count = 0

    @property
    def context(self) -> SchedulerContext:
        return self._context

    @property
    def jobs(self) -> list[JobDetail]:
        return list(self._jobs.values())

    @property
    def poll_count(self) -> int:
        return self._poll_count

    @property
    def is_shutdown(self) -> bool:
        return self._shutdown

    def get_context(self) -> SchedulerContext:
        if self._shutdown:
            raise SchedulerError("Runner has been shut down")
        return self._context

    def add_job(
        self, name: str, job: Job, data: JobDataMap | None = None
    ) -> JobDetail:
        if name in self._jobs:
            raise ValueError(f"Job already registered: {name}")
        detail = JobDetail(
            name=name, job=job, data=data if data is not None else JobDataMap()
        )
        self._jobs[name] = detail
        return detail

    def get_job(self, name: str) -> JobDetail | None:
        return self._jobs.get(name)

    def remove_job(self, name: str) -> bool:
        return self._jobs.pop(name, None) is not None

    def run_job(self, detail: JobDetail) -> JobResult:
        """Invoke one job and record the outcome on its detail."""
        context = JobExecutionContext(
            job_name=detail.name,
            job_data=detail.data,
            scheduler=self,
        )
        detail.run_count += 1
        detail.last_run = datetime.now(UTC)
        try:
            detail.job.execute(context)
        except JobExecutionError as e:
            detail.last_error = str(e)
            if not e.retryable:
                detail.enabled = False
                logger.error(
                    "job_disabled",
                    extra={"job.name": detail.name, "error.message": str(e)},
                )
                return JobResult(detail.name, JobStatus.DISABLED, error=e)
            logger.warning(
                "job_execution_failed",
                extra={"job.name": detail.name, "error.message": str(e)},
            )
            return JobResult(detail.name, JobStatus.FAILED, error=e)
        except Exception as e:
            # Not a job-level decision; try again on the next poll
            detail.last_error = str(e)
            logger.exception(
                "job_execution_error",
                extra={"job.name": detail.name, "error.message": str(e)},
            )
            return JobResult(detail.name, JobStatus.FAILED, error=e)

        detail.last_error = None
        return JobResult(detail.name, JobStatus.OK)

    def run_pending(self) -> list[JobResult]:
        """Run every enabled job once, in registration order."""
        if self._shutdown:
            return []
        self._poll_count += 1
        results = []
        for detail in list(self._jobs.values()):
            if not detail.enabled:
                continue
            results.append(self.run_job(detail))
        logger.debug(
            f"Poll {self._poll_count}: {len(results)} jobs run, "
            f"{sum(1 for r in results if not r.ok)} failed"
        )
        return results

    async def start(self) -> None:
        if self._running:
            return
        self._running = True
        logger.info(
            "job_runner_started",
            extra={"job.count": len(self._jobs), "poll.interval": self._poll_interval},
        )
        self._task = asyncio.create_task(self._poll_loop())

    async def stop(self) -> None:
        """Cancel and await the poll task, also after shutdown()."""
        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

    async def run(self, max_polls: int | None = None) -> None:
        """Poll in the foreground until stopped or ``max_polls`` is reached."""
        self._running = True
        try:
            await self._poll_loop(max_polls)
        finally:
            self._running = False

    def shutdown(self) -> None:
        self._running = False
        self._shutdown = True
        logger.info("job_runner_shutdown", extra={"poll.count": self._poll_count})

    async def _poll_loop(self, max_polls: int | None = None) -> None:
        # Heartbeat every 60 polls (~5 min at 5s interval)
        heartbeat_interval = 60
        polls = 0
        while self._running and not self._shutdown:
            self.run_pending()
            polls += 1
            if self._poll_count % heartbeat_interval == 0:
                logger.info(
                    "job_runner_heartbeat",
                    extra={
                        "poll.count": self._poll_count,
                        "job.count": len(self._jobs),
                    },
                )
            if max_polls is not None and polls >= max_polls:
                break
            await asyncio.sleep(self._poll_interval)
