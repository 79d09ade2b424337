"""
Profile Request/Response Schemas
"""
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import Field

from workpass.domain.enums import AvailabilityStatus
from .base import CamelModel


class ProfileRequest(CamelModel):
    """Create-or-update body; only the fields sent are written"""

    trade: Optional[str] = Field(None, max_length=255)
    years_experience: Optional[int] = Field(None, ge=0, le=80)
    location: Optional[str] = Field(None, max_length=255)
    availability_status: AvailabilityStatus = AvailabilityStatus.AVAILABLE
    hourly_rate: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    bio: Optional[str] = None
    skills: Optional[List[str]] = None
    preferences: Optional[Dict[str, Any]] = None


class ProfileResponse(CamelModel):
    id: int
    user_id: str
    trade: Optional[str] = None
    years_experience: Optional[int] = None
    location: Optional[str] = None
    availability_status: AvailabilityStatus
    hourly_rate: Optional[Decimal] = None
    bio: Optional[str] = None
    skills: Optional[List[str]] = None
    preferences: Optional[Dict[str, Any]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
