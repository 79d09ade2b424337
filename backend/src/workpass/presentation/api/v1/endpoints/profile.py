"""
Profile Endpoints
"""
from typing import Optional

from fastapi import APIRouter, Depends

from workpass.application.services.profiles import ProfileService
from workpass.domain.entities import User
from workpass.presentation.api.v1.container import get_profile_service
from workpass.presentation.api.v1.dependencies import get_current_user
from workpass.presentation.api.v1.schemas.profile import ProfileRequest, ProfileResponse


router = APIRouter()


@router.get("/profile", response_model=Optional[ProfileResponse])
async def get_profile(
    user: User = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service)
):
    """Caller's profile, or null before the first save"""
    profile = await service.get_profile(user.id)
    return ProfileResponse.model_validate(profile) if profile else None


@router.post("/profile", response_model=ProfileResponse)
async def save_profile(
    body: ProfileRequest,
    user: User = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service)
):
    profile = await service.save_profile(user.id, body.model_dump(exclude_unset=True))
    return ProfileResponse.model_validate(profile)
