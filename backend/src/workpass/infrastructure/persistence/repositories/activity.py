"""
Activity Repository Implementation
Append-only; no update or delete paths
"""
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from loguru import logger

from workpass.domain.entities import UserActivity
from workpass.application.repositories.interfaces import IActivityRepository
from workpass.infrastructure.persistence.models.user_activity import UserActivityModel
from workpass.core.exceptions import RepositoryException


class ActivityRepository(IActivityRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_recent(self, user_id: str, limit: int) -> List[UserActivity]:
        try:
            result = await self.session.execute(
                select(UserActivityModel)
                .where(UserActivityModel.user_id == user_id)
                .order_by(UserActivityModel.created_at.desc())
                .limit(limit)
            )
            return [self._to_entity(m) for m in result.scalars().all()]

        except Exception as e:
            logger.error(f"Failed to list activity for user {user_id}: {str(e)}")
            raise RepositoryException(f"Failed to list activity: {str(e)}")

    async def log(self, activity: UserActivity) -> UserActivity:
        try:
            model = UserActivityModel(
                user_id=activity.user_id,
                action=activity.action,
                description=activity.description,
                activity_metadata=activity.metadata,
            )
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)
            return self._to_entity(model)

        except Exception as e:
            logger.error(f"Failed to log activity {activity.action} for user {activity.user_id}: {str(e)}")
            raise RepositoryException(f"Failed to log activity: {str(e)}")

    def _to_entity(self, model: UserActivityModel) -> UserActivity:
        return UserActivity(
            id=model.id,
            user_id=model.user_id,
            action=model.action,
            description=model.description,
            metadata=model.activity_metadata,
            created_at=model.created_at
        )
