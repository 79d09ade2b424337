"""
User Domain Entity
Local mirror of an identity-provider account
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..enums import UserRole, ExperienceLevel


@dataclass(frozen=True)
class User:
    """User domain entity - immutable

    The id is the identity provider's subject claim; the row is upserted
    whenever an authenticated request carries fresh claims.
    """

    id: str

    # Contact
    email: Optional[str] = None
    phone: Optional[str] = None

    # Personal information
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None

    # Site role
    role: Optional[UserRole] = None
    experience_level: Optional[ExperienceLevel] = None

    # Verification flags
    is_email_verified: bool = False
    is_phone_verified: bool = False

    # Last persisted work-readiness score (derived, see DashboardService)
    work_readiness_score: int = 0

    # Timestamps
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.id or len(self.id.strip()) == 0:
            raise ValueError("User id cannot be empty")

    @property
    def display_name(self) -> str:
        parts = [p for p in (self.first_name, self.last_name) if p]
        if parts:
            return " ".join(parts)
        return self.email or self.id

    def __str__(self) -> str:
        return f"User({self.id})"
