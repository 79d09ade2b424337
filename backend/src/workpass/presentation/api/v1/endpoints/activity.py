"""
Activity Timeline Endpoint
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from workpass.application.repositories.interfaces import IActivityRepository
from workpass.core.config import settings
from workpass.domain.entities import User
from workpass.presentation.api.v1.container import get_activity_repository
from workpass.presentation.api.v1.dependencies import get_current_user
from workpass.presentation.api.v1.schemas.activity import ActivityResponse


router = APIRouter()


@router.get("/activity", response_model=List[ActivityResponse])
async def list_activity(
    limit: Optional[int] = Query(None, ge=1, le=200),
    user: User = Depends(get_current_user),
    activity_repo: IActivityRepository = Depends(get_activity_repository)
):
    entries = await activity_repo.list_recent(user.id, limit or settings.ACTIVITY_DEFAULT_LIMIT)
    return [ActivityResponse.model_validate(a) for a in entries]
