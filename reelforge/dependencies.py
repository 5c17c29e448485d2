from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from reelforge.core.scheduler import JobScheduler
from reelforge.pipeline.orchestrator import ContentOrchestrator


@lru_cache
def get_orchestrator() -> ContentOrchestrator:
    """Process-wide orchestrator shared by the API and the scheduler."""
    return ContentOrchestrator()


@lru_cache
def get_scheduler() -> JobScheduler:
    """Process-wide job scheduler."""
    return JobScheduler(orchestrator=get_orchestrator())


# Type aliases for dependency injection
Orchestrator = Annotated[ContentOrchestrator, Depends(get_orchestrator)]
Scheduler = Annotated[JobScheduler, Depends(get_scheduler)]
