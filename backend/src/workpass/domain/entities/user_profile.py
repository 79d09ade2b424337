"""
UserProfile Domain Entity
Construction-specific profile data, one per user
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from ..enums import AvailabilityStatus


@dataclass(frozen=True)
class UserProfile:
    """User profile domain entity - immutable"""

    user_id: str
    id: Optional[int] = None

    # Trade
    trade: Optional[str] = None  # electrician, carpenter, plumber, ...
    years_experience: Optional[int] = None
    location: Optional[str] = None

    # Availability
    availability_status: AvailabilityStatus = AvailabilityStatus.AVAILABLE
    hourly_rate: Optional[Decimal] = None

    # Free text and structured extras
    bio: Optional[str] = None
    skills: Optional[List[str]] = None
    preferences: Optional[Dict[str, Any]] = None  # travel distance, shift types, ...

    # Timestamps
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if self.years_experience is not None and self.years_experience < 0:
            raise ValueError("Years of experience cannot be negative")
        if self.hourly_rate is not None and self.hourly_rate < 0:
            raise ValueError("Hourly rate cannot be negative")

    def is_available(self) -> bool:
        return self.availability_status == AvailabilityStatus.AVAILABLE
