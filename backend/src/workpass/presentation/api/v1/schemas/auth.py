"""
Authenticated user schemas
"""
from datetime import datetime
from typing import Optional

from workpass.domain.enums import UserRole, ExperienceLevel
from .base import CamelModel


class UserResponse(CamelModel):
    """Local mirror of the identity-provider account"""

    id: str
    email: Optional[str] = None
    phone: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None
    role: Optional[UserRole] = None
    experience_level: Optional[ExperienceLevel] = None
    is_email_verified: bool = False
    is_phone_verified: bool = False
    work_readiness_score: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
