"""In-memory state owned by the job scheduler."""

import asyncio
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime

from reelforge.schemas.content import ContentArtifact
from reelforge.schemas.trends import TrendRecord


@dataclass
class JobRunInfo:
    """Bookkeeping for one job."""

    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    last_run_at: datetime | None = None
    last_error: str | None = None

    @property
    def running(self) -> bool:
        return self.lock.locked()


class SchedulerState:
    """
    Latest trends, a bounded history of generated artifacts, and per-job locks.

    Only the newest history_size artifacts are kept; older ones are dropped.
    """

    def __init__(self, job_names: list[str], history_size: int = 10) -> None:
        self.latest_trends: list[TrendRecord] = []
        self.generated_content: deque[ContentArtifact] = deque(maxlen=history_size)
        self.jobs: dict[str, JobRunInfo] = {name: JobRunInfo() for name in job_names}

    def record_content(self, artifact: ContentArtifact) -> None:
        self.generated_content.append(artifact)

    @property
    def latest_content(self) -> ContentArtifact | None:
        return self.generated_content[-1] if self.generated_content else None
