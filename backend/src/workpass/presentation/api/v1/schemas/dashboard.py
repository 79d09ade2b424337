"""
Dashboard Response Schema
"""
from typing import List, Optional

from pydantic import Field

from workpass.domain.entities import Dashboard
from .activity import ActivityResponse
from .auth import UserResponse
from .base import CamelModel
from .credential import CredentialResponse
from .job import JobApplicationWithJobResponse
from .profile import ProfileResponse


class DashboardResponse(CamelModel):
    user: UserResponse
    profile: Optional[ProfileResponse] = None
    credentials: List[CredentialResponse]
    expiring_credentials: List[CredentialResponse]
    recent_activity: List[ActivityResponse]
    job_applications: List[JobApplicationWithJobResponse]
    work_readiness_score: int = Field(..., ge=0, le=100)

    @classmethod
    def from_entity(cls, dashboard: Dashboard) -> "DashboardResponse":
        return cls(
            user=UserResponse.model_validate(dashboard.user),
            profile=ProfileResponse.model_validate(dashboard.profile) if dashboard.profile else None,
            credentials=[CredentialResponse.model_validate(c) for c in dashboard.credentials],
            expiring_credentials=[
                CredentialResponse.model_validate(c) for c in dashboard.expiring_credentials
            ],
            recent_activity=[ActivityResponse.model_validate(a) for a in dashboard.recent_activity],
            job_applications=[
                JobApplicationWithJobResponse.from_projection(a) for a in dashboard.job_applications
            ],
            work_readiness_score=dashboard.work_readiness_score,
        )
