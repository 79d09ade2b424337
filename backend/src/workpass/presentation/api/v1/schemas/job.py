"""
Job and Job Application Schemas
"""
from datetime import date, datetime
from typing import Any, Optional

from pydantic import Field, field_validator

from workpass.domain.entities import JobApplicationWithJob
from workpass.domain.enums import ApplicationStatus, JobType
from .base import CamelModel


class JobResponse(CamelModel):
    """Response schema for a single job"""

    id: int
    title: str
    company: str
    location: str
    description: Optional[str] = None
    requirements: Optional[Any] = None
    pay_range: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    job_type: Optional[JobType] = None
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class JobApplicationRequest(CamelModel):
    job_id: int = Field(..., gt=0)
    match_score: Optional[int] = Field(None, ge=0, le=100)


class JobApplicationResponse(CamelModel):
    id: int
    user_id: str
    job_id: int
    status: ApplicationStatus
    match_score: Optional[int] = Field(None, description="Match score (0-100)")
    applied_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("match_score", mode="before")
    @classmethod
    def unwrap_match_score(cls, v):
        return int(v) if v is not None else None


class JobApplicationWithJobResponse(JobApplicationResponse):
    """An application together with the job it targets"""

    job: JobResponse

    @classmethod
    def from_projection(cls, item: JobApplicationWithJob) -> "JobApplicationWithJobResponse":
        application = JobApplicationResponse.model_validate(item.application)
        return cls(
            **application.model_dump(),
            job=JobResponse.model_validate(item.job),
        )
