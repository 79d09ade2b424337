"""
Profile Service
Create-or-update of the one-per-user construction profile
"""
from typing import Any, Dict, Optional

from workpass.domain.entities import UserProfile, UserActivity
from workpass.domain.enums import ActivityAction
from workpass.application.repositories.interfaces import IUserProfileRepository, IActivityRepository


class ProfileService:
    def __init__(
        self,
        profile_repository: IUserProfileRepository,
        activity_repository: IActivityRepository
    ):
        self.profile_repo = profile_repository
        self.activity_repo = activity_repository

    async def get_profile(self, user_id: str) -> Optional[UserProfile]:
        return await self.profile_repo.get_by_user_id(user_id)

    async def save_profile(self, user_id: str, fields: Dict[str, Any]) -> UserProfile:
        """Create the profile on first save, otherwise apply the given fields"""
        existing = await self.profile_repo.get_by_user_id(user_id)

        if existing is None:
            profile = await self.profile_repo.create(UserProfile(user_id=user_id, **fields))
            action, description = ActivityAction.CREATE_PROFILE, "Created profile"
        else:
            profile = await self.profile_repo.update(user_id, fields) if fields else existing
            action, description = ActivityAction.UPDATE_PROFILE, "Updated profile"

        await self.activity_repo.log(
            UserActivity(
                user_id=user_id,
                action=action.value,
                description=description,
                metadata={"fields": sorted(fields)},
            )
        )
        return profile
