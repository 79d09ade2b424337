"""
Job Endpoints
Read-only; jobs are created by the ingestion process
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from workpass.application.repositories.interfaces import IJobRepository
from workpass.core.config import settings
from workpass.core.exceptions import ResourceNotFoundException
from workpass.domain.entities import User
from workpass.presentation.api.v1.container import get_job_repository
from workpass.presentation.api.v1.dependencies import get_current_user
from workpass.presentation.api.v1.schemas.job import JobResponse


router = APIRouter()


@router.get("/jobs", response_model=List[JobResponse])
async def list_jobs(
    limit: Optional[int] = Query(None, ge=1, le=500),
    user: User = Depends(get_current_user),
    job_repo: IJobRepository = Depends(get_job_repository)
):
    """Active jobs, newest first"""
    jobs = await job_repo.list_active(limit or settings.JOBS_DEFAULT_LIMIT)
    return [JobResponse.model_validate(j) for j in jobs]


@router.get("/jobs/{job_id}", response_model=JobResponse)
async def get_job(
    job_id: int,
    user: User = Depends(get_current_user),
    job_repo: IJobRepository = Depends(get_job_repository)
):
    job = await job_repo.get_by_id(job_id)
    if not job:
        raise ResourceNotFoundException("Job", str(job_id))
    return JobResponse.model_validate(job)
