"""
APScheduler integration for FastAPI.

Runs the content jobs in-process on cron schedules from settings.

Jobs:
- trendDiscovery: refreshes trending topics for the configured niche
- contentGeneration: runs the full pipeline on a discovered topic
- contentPosting: publishes the latest artifact to configured platforms

Each job is single-flight: a scheduled run is skipped and a manual run is
rejected while the same job is still running.
"""

from collections.abc import Awaitable, Callable
from typing import Any

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from reelforge.config import get_config, get_settings
from reelforge.core.datetime_utils import isoformat_z, utc_now
from reelforge.core.exceptions import JobAlreadyRunningError, UnknownJobError
from reelforge.core.logging import get_logger
from reelforge.jobs.handlers import run_content_generation, run_content_posting, run_trend_discovery
from reelforge.jobs.state import SchedulerState
from reelforge.pipeline.orchestrator import ContentOrchestrator

logger = get_logger(__name__)

TREND_DISCOVERY = "trendDiscovery"
CONTENT_GENERATION = "contentGeneration"
CONTENT_POSTING = "contentPosting"
JOB_NAMES = [TREND_DISCOVERY, CONTENT_GENERATION, CONTENT_POSTING]

JobHandler = Callable[[ContentOrchestrator, SchedulerState], Awaitable[Any]]


class JobScheduler:
    """Owns the APScheduler instance, the job handlers and their shared state."""

    def __init__(
        self,
        orchestrator: ContentOrchestrator | None = None,
        state: SchedulerState | None = None,
    ):
        self.orchestrator = orchestrator or ContentOrchestrator()
        self.state = state or SchedulerState(
            JOB_NAMES, history_size=get_config().posting.history_size
        )
        self._handlers: dict[str, JobHandler] = {
            TREND_DISCOVERY: run_trend_discovery,
            CONTENT_GENERATION: run_content_generation,
            CONTENT_POSTING: run_content_posting,
        }
        self._scheduler: AsyncIOScheduler | None = None
        self._scheduled: set[str] = set()

    def get_schedule_for_job(self, name: str) -> str:
        settings = get_settings()
        schedules = {
            TREND_DISCOVERY: settings.trend_discovery_cron,
            CONTENT_GENERATION: settings.content_generation_cron,
            CONTENT_POSTING: settings.posting_cron,
        }
        return schedules.get(name, "unknown")

    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    async def start(self) -> None:
        """Schedule every job with a valid cron expression and start the scheduler."""
        if not get_settings().scheduler_enabled:
            logger.info("scheduler_disabled_by_config")
            return

        self._scheduler = AsyncIOScheduler(timezone="UTC")

        for name in JOB_NAMES:
            schedule = self.get_schedule_for_job(name)
            try:
                trigger = CronTrigger.from_crontab(schedule, timezone="UTC")
            except ValueError as e:
                logger.bind(job=name, schedule=schedule, error=str(e)).error(
                    "invalid_cron_schedule"
                )
                continue

            self._scheduler.add_job(
                self._run_scheduled,
                trigger,
                args=[name],
                id=name,
                name=name,
                replace_existing=True,
                max_instances=1,
                coalesce=True,
            )
            self._scheduled.add(name)
            logger.bind(job=name, schedule=schedule).info("job_scheduled")

        self._scheduler.start()
        logger.bind(jobs=sorted(self._scheduled)).info("scheduler_started")

    async def stop(self) -> None:
        """Gracefully stop the scheduler and wait for pending notifications."""
        if self._scheduler is not None:
            if self._scheduler.running:
                self._scheduler.shutdown(wait=False)
            self._scheduler = None
            self._scheduled.clear()
            logger.info("scheduler_stopped")
        await self.orchestrator.drain_background_tasks()

    async def _execute(self, name: str) -> Any:
        info = self.state.jobs[name]
        async with info.lock:
            info.last_run_at = utc_now()
            try:
                result = await self._handlers[name](self.orchestrator, self.state)
            except Exception as e:
                info.last_error = str(e)
                raise
            info.last_error = None
            return result

    async def _run_scheduled(self, name: str) -> None:
        if self.state.jobs[name].running:
            logger.bind(job=name).warning("scheduled_job_skipped_already_running")
            return

        logger.bind(job=name).info("scheduled_job_started")
        try:
            await self._execute(name)
        except Exception as e:
            logger.bind(job=name, error=str(e)).exception("scheduled_job_failed")

    async def run_job_manually(self, name: str) -> Any:
        """
        Run a job now and return its result.

        Raises:
            UnknownJobError: name is not a known job
            JobAlreadyRunningError: the job is already running
        """
        if name not in self._handlers:
            raise UnknownJobError(name)
        if self.state.jobs[name].running:
            raise JobAlreadyRunningError(name)

        logger.bind(job=name).info("running_job_manually")
        return await self._execute(name)

    def get_job_status(self) -> dict[str, dict[str, Any]]:
        """Per-job schedule, run state and last outcome."""
        status = {}
        for name in JOB_NAMES:
            info = self.state.jobs[name]
            next_run_at = None
            if self._scheduler is not None:
                job = self._scheduler.get_job(name)
                if job is not None and getattr(job, "next_run_time", None):
                    next_run_at = isoformat_z(job.next_run_time)
            status[name] = {
                "scheduled": name in self._scheduled,
                "running": info.running,
                "schedule": self.get_schedule_for_job(name),
                "next_run_at": next_run_at,
                "last_run_at": isoformat_z(info.last_run_at) if info.last_run_at else None,
                "last_error": info.last_error,
            }
        return status
