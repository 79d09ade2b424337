"""
UserProfile Repository Implementation
"""
from typing import Any, Dict, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func
from loguru import logger

from workpass.domain.entities import UserProfile
from workpass.domain.enums import AvailabilityStatus
from workpass.application.repositories.interfaces import IUserProfileRepository
from workpass.infrastructure.persistence.models.user_profile import UserProfileModel
from workpass.infrastructure.persistence.repositories._values import column_values
from workpass.core.exceptions import RepositoryException


class UserProfileRepository(IUserProfileRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_id(self, user_id: str) -> Optional[UserProfile]:
        try:
            result = await self.session.execute(
                select(UserProfileModel).where(UserProfileModel.user_id == user_id)
            )
            model = result.scalar_one_or_none()
            return self._to_entity(model) if model else None

        except Exception as e:
            logger.error(f"Failed to get profile for user {user_id}: {str(e)}")
            raise RepositoryException(f"Failed to get profile: {str(e)}")

    async def create(self, profile: UserProfile) -> UserProfile:
        try:
            model = self._to_model(profile)
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)
            return self._to_entity(model)

        except Exception as e:
            logger.error(f"Failed to create profile for user {profile.user_id}: {str(e)}")
            raise RepositoryException(f"Failed to create profile: {str(e)}")

    async def update(self, user_id: str, updates: Dict[str, Any]) -> Optional[UserProfile]:
        try:
            result = await self.session.execute(
                update(UserProfileModel)
                .where(UserProfileModel.user_id == user_id)
                .values(**column_values(updates), updated_at=func.now())
                .returning(UserProfileModel)
                .execution_options(synchronize_session=False, populate_existing=True)
            )
            model = result.scalar_one_or_none()
            return self._to_entity(model) if model else None

        except Exception as e:
            logger.error(f"Failed to update profile for user {user_id}: {str(e)}")
            raise RepositoryException(f"Failed to update profile: {str(e)}")

    def _to_model(self, entity: UserProfile) -> UserProfileModel:
        return UserProfileModel(
            user_id=entity.user_id,
            trade=entity.trade,
            years_experience=entity.years_experience,
            location=entity.location,
            availability_status=entity.availability_status.value,
            hourly_rate=entity.hourly_rate,
            bio=entity.bio,
            skills=entity.skills,
            preferences=entity.preferences,
        )

    def _to_entity(self, model: UserProfileModel) -> UserProfile:
        return UserProfile(
            id=model.id,
            user_id=model.user_id,
            trade=model.trade,
            years_experience=model.years_experience,
            location=model.location,
            availability_status=AvailabilityStatus(model.availability_status or AvailabilityStatus.AVAILABLE.value),
            hourly_rate=model.hourly_rate,
            bio=model.bio,
            skills=model.skills,
            preferences=model.preferences,
            created_at=model.created_at,
            updated_at=model.updated_at
        )
