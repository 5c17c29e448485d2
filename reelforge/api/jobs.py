"""Scheduled job status and manual trigger endpoints."""

from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel

from reelforge.core.logging import get_logger
from reelforge.dependencies import Scheduler
from reelforge.schemas.api import MessageResponse, SuccessResponse

logger = get_logger(__name__)

router = APIRouter()


class JobStatusResponse(BaseModel):
    """Response model for one job's status."""

    scheduled: bool
    running: bool
    schedule: str
    next_run_at: str | None
    last_run_at: str | None
    last_error: str | None


def _to_jsonable(result: Any) -> Any:
    if isinstance(result, BaseModel):
        return result.model_dump(mode="json")
    if isinstance(result, list):
        return [_to_jsonable(item) for item in result]
    return result


@router.get("/jobs/status", response_model=SuccessResponse[dict[str, JobStatusResponse]])
async def job_status(scheduler: Scheduler) -> SuccessResponse[dict[str, JobStatusResponse]]:
    """Schedule and last outcome of every job."""
    return SuccessResponse(
        data={name: JobStatusResponse(**info) for name, info in scheduler.get_job_status().items()}
    )


@router.post("/jobs/run/{job_name}", response_model=MessageResponse)
async def run_job(job_name: str, scheduler: Scheduler) -> MessageResponse:
    """
    Run a job now.

    Unknown job names return 404; a job that is already running returns 409.
    """
    logger.bind(job=job_name).info("api_manual_job_trigger_requested")
    result = await scheduler.run_job_manually(job_name)
    return MessageResponse(
        message=f"Job {job_name} executed successfully",
        data=_to_jsonable(result),
    )
