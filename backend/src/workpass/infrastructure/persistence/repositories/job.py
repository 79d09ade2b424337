"""
Job Repository Implementation
"""
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from workpass.domain.entities import Job
from workpass.domain.enums import JobType
from workpass.application.repositories.interfaces import IJobRepository
from workpass.infrastructure.persistence.models.job import JobModel
from workpass.core.exceptions import RepositoryException


class JobRepository(IJobRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_active(self, limit: int) -> List[Job]:
        """Active jobs, newest first"""
        try:
            result = await self.session.execute(
                select(JobModel)
                .where(JobModel.is_active.is_(True))
                .order_by(JobModel.created_at.desc())
                .limit(limit)
            )
            return [self._to_entity(m) for m in result.scalars().all()]

        except Exception as e:
            logger.error(f"Failed to list jobs: {str(e)}")
            raise RepositoryException(f"Failed to list jobs: {str(e)}")

    async def get_by_id(self, job_id: int) -> Optional[Job]:
        try:
            result = await self.session.execute(
                select(JobModel).where(JobModel.id == job_id)
            )
            model = result.scalar_one_or_none()
            return self._to_entity(model) if model else None

        except Exception as e:
            logger.error(f"Failed to get job {job_id}: {str(e)}")
            raise RepositoryException(f"Failed to get job: {str(e)}")

    async def create(self, job: Job) -> Job:
        try:
            model = self._to_model(job)
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)
            return self._to_entity(model)

        except Exception as e:
            logger.error(f"Failed to create job {job.title}: {str(e)}")
            raise RepositoryException(f"Failed to create job: {str(e)}")

    def _to_model(self, entity: Job) -> JobModel:
        return JobModel(
            title=entity.title,
            company=entity.company,
            location=entity.location,
            description=entity.description,
            requirements=entity.requirements,
            pay_range=entity.pay_range,
            start_date=entity.start_date,
            end_date=entity.end_date,
            job_type=entity.job_type.value if entity.job_type else None,
            is_active=entity.is_active,
        )

    def _to_entity(self, model: JobModel) -> Job:
        return Job(
            id=model.id,
            title=model.title,
            company=model.company,
            location=model.location,
            description=model.description,
            requirements=model.requirements,
            pay_range=model.pay_range,
            start_date=model.start_date,
            end_date=model.end_date,
            job_type=JobType(model.job_type) if model.job_type else None,
            is_active=bool(model.is_active),
            created_at=model.created_at,
            updated_at=model.updated_at
        )
