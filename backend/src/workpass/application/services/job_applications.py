"""
Job Application Guard
One application per (user, job)
"""
from typing import List, Optional

from loguru import logger

from workpass.core.exceptions import DuplicateResourceException, ResourceNotFoundException
from workpass.domain.entities import JobApplication, JobApplicationWithJob, UserActivity
from workpass.domain.enums import ActivityAction
from workpass.domain.value_objects import MatchScore
from workpass.application.repositories.interfaces import (
    IJobRepository,
    IJobApplicationRepository,
    IActivityRepository,
)


class JobApplicationService:
    def __init__(
        self,
        job_repository: IJobRepository,
        application_repository: IJobApplicationRepository,
        activity_repository: IActivityRepository
    ):
        self.job_repo = job_repository
        self.application_repo = application_repository
        self.activity_repo = activity_repository

    async def list_applications(self, user_id: str) -> List[JobApplicationWithJob]:
        return await self.application_repo.list_with_jobs(user_id)

    async def apply(
        self,
        user_id: str,
        job_id: int,
        match_score: Optional[MatchScore] = None
    ) -> JobApplication:
        """
        Submit a pending application

        Raises:
            ResourceNotFoundException: job does not exist
            DuplicateResourceException: the user already applied to this job
        """
        job = await self.job_repo.get_by_id(job_id)
        if not job:
            raise ResourceNotFoundException("Job", str(job_id))

        if await self.application_repo.get(user_id, job_id):
            logger.info(f"User {user_id} already applied to job {job_id}")
            raise DuplicateResourceException(
                "JobApplication", "job_id", str(job_id),
                message="Already applied to this job"
            )

        # A concurrent duplicate past the check above is rejected by the unique constraint
        application = await self.application_repo.create(
            JobApplication(user_id=user_id, job_id=job_id, match_score=match_score)
        )
        logger.info(f"User {user_id} applied to job {job_id}")

        await self.activity_repo.log(
            UserActivity(
                user_id=user_id,
                action=ActivityAction.APPLY_JOB.value,
                description=f"Applied to {job}",
                metadata={"jobId": job_id, "applicationId": application.id},
            )
        )
        return application
