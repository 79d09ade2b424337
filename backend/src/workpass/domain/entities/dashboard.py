"""
Dashboard Read Model
Everything the worker dashboard renders, assembled in one pass
"""
from dataclasses import dataclass
from typing import List, Optional

from .activity import UserActivity
from .credential import Credential
from .job_application import JobApplicationWithJob
from .user import User
from .user_profile import UserProfile


@dataclass(frozen=True)
class Dashboard:
    user: User
    profile: Optional[UserProfile]
    credentials: List[Credential]
    expiring_credentials: List[Credential]
    recent_activity: List[UserActivity]
    job_applications: List[JobApplicationWithJob]
    work_readiness_score: int
