"""
Job Application Endpoints
"""
from typing import List

from fastapi import APIRouter, Depends

from workpass.application.services.job_applications import JobApplicationService
from workpass.domain.entities import User
from workpass.domain.value_objects import MatchScore
from workpass.presentation.api.v1.container import get_job_application_service
from workpass.presentation.api.v1.dependencies import get_current_user
from workpass.presentation.api.v1.schemas.job import (
    JobApplicationRequest,
    JobApplicationResponse,
    JobApplicationWithJobResponse,
)


router = APIRouter()


@router.get("/job-applications", response_model=List[JobApplicationWithJobResponse])
async def list_job_applications(
    user: User = Depends(get_current_user),
    service: JobApplicationService = Depends(get_job_application_service)
):
    applications = await service.list_applications(user.id)
    return [JobApplicationWithJobResponse.from_projection(a) for a in applications]


@router.post("/job-applications", response_model=JobApplicationResponse)
async def apply_to_job(
    body: JobApplicationRequest,
    user: User = Depends(get_current_user),
    service: JobApplicationService = Depends(get_job_application_service)
):
    match_score = MatchScore(body.match_score) if body.match_score is not None else None
    application = await service.apply(user.id, body.job_id, match_score=match_score)
    return JobApplicationResponse.model_validate(application)
