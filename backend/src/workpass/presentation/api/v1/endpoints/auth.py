"""
Authentication Endpoints
/api/auth/* routes (tokens come from the identity provider)
"""
from fastapi import APIRouter, Depends

from workpass.domain.entities import User
from workpass.presentation.api.v1.dependencies import get_current_user
from workpass.presentation.api.v1.schemas.auth import UserResponse


router = APIRouter()


@router.get("/auth/user", response_model=UserResponse)
async def get_authenticated_user(user: User = Depends(get_current_user)):
    """The caller's mirrored user record"""
    return UserResponse.model_validate(user)
