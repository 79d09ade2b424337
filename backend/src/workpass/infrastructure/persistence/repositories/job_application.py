"""
JobApplication Repository Implementation
"""
from typing import List, Optional

from sqlalchemy import select, and_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from workpass.domain.entities import JobApplication, JobApplicationWithJob
from workpass.domain.enums import ApplicationStatus
from workpass.domain.value_objects import MatchScore
from workpass.application.repositories.interfaces import IJobApplicationRepository
from workpass.infrastructure.persistence.models.job import JobModel
from workpass.infrastructure.persistence.models.job_application import JobApplicationModel
from workpass.infrastructure.persistence.repositories.job import JobRepository
from workpass.core.exceptions import DuplicateResourceException, RepositoryException


class JobApplicationRepository(IJobApplicationRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, user_id: str, job_id: int) -> Optional[JobApplication]:
        try:
            result = await self.session.execute(
                select(JobApplicationModel).where(
                    and_(JobApplicationModel.user_id == user_id, JobApplicationModel.job_id == job_id)
                )
            )
            model = result.scalar_one_or_none()
            return self._to_entity(model) if model else None

        except Exception as e:
            logger.error(f"Failed to get application user={user_id}, job={job_id}: {str(e)}")
            raise RepositoryException(f"Failed to get job application: {str(e)}")

    async def create(self, application: JobApplication) -> JobApplication:
        model = self._to_model(application)
        try:
            # Savepoint keeps the request transaction usable after a constraint hit
            async with self.session.begin_nested():
                self.session.add(model)
                await self.session.flush()
            await self.session.refresh(model)
            return self._to_entity(model)

        except IntegrityError:
            logger.warning(
                f"Duplicate application rejected by constraint: user={application.user_id}, job={application.job_id}"
            )
            raise DuplicateResourceException(
                "JobApplication", "job_id", str(application.job_id),
                message="Already applied to this job"
            )
        except Exception as e:
            logger.error(f"Failed to create application for user {application.user_id}: {str(e)}")
            raise RepositoryException(f"Failed to create job application: {str(e)}")

    async def list_with_jobs(self, user_id: str) -> List[JobApplicationWithJob]:
        try:
            result = await self.session.execute(
                select(JobApplicationModel, JobModel)
                .join(JobModel, JobApplicationModel.job_id == JobModel.id)
                .where(JobApplicationModel.user_id == user_id)
                .order_by(JobApplicationModel.applied_at.desc())
            )
            job_mapper = JobRepository(self.session)
            return [
                JobApplicationWithJob(
                    application=self._to_entity(application_model),
                    job=job_mapper._to_entity(job_model),
                )
                for application_model, job_model in result.all()
            ]

        except Exception as e:
            logger.error(f"Failed to list applications for user {user_id}: {str(e)}")
            raise RepositoryException(f"Failed to list job applications: {str(e)}")

    def _to_model(self, entity: JobApplication) -> JobApplicationModel:
        return JobApplicationModel(
            user_id=entity.user_id,
            job_id=entity.job_id,
            status=entity.status.value,
            match_score=int(entity.match_score) if entity.match_score is not None else None,
        )

    def _to_entity(self, model: JobApplicationModel) -> JobApplication:
        return JobApplication(
            id=model.id,
            user_id=model.user_id,
            job_id=model.job_id,
            status=ApplicationStatus(model.status),
            match_score=MatchScore(model.match_score) if model.match_score is not None else None,
            applied_at=model.applied_at,
            updated_at=model.updated_at
        )
