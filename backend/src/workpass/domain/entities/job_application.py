"""
JobApplication Domain Entity
A user's application to a job, plus the joined read projection
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..enums import ApplicationStatus
from ..value_objects import MatchScore
from .job import Job


@dataclass(frozen=True)
class JobApplication:
    """Job application domain entity - immutable"""

    user_id: str
    job_id: int
    id: Optional[int] = None

    status: ApplicationStatus = ApplicationStatus.PENDING
    match_score: Optional[MatchScore] = None

    applied_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_pending(self) -> bool:
        return self.status == ApplicationStatus.PENDING

    def is_terminal(self) -> bool:
        return self.status in {ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED}

    def __str__(self) -> str:
        return f"JobApplication({self.id}, status={self.status.value})"


@dataclass(frozen=True)
class JobApplicationWithJob:
    """Read projection: an application joined with the job it targets"""

    application: JobApplication
    job: Job
