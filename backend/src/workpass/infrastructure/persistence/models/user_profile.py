"""
UserProfile ORM Model
Construction-specific profile, one row per user
"""
from sqlalchemy import Column, String, Integer, DateTime, Numeric, Text, JSON, ForeignKey
from sqlalchemy.sql import func

from workpass.core.database import Base
from workpass.domain.enums import AvailabilityStatus


class UserProfileModel(Base):
    """User profile table ORM model"""

    __tablename__ = "user_profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True, index=True)

    # Trade
    trade = Column(String(100), nullable=True)
    years_experience = Column(Integer, nullable=True)
    location = Column(String(255), nullable=True)

    # Availability
    availability_status = Column(String(50), nullable=False, default=AvailabilityStatus.AVAILABLE.value)
    hourly_rate = Column(Numeric(10, 2), nullable=True)

    # Free text / structured extras
    bio = Column(Text, nullable=True)
    skills = Column(JSON, nullable=True)  # List[str]
    preferences = Column(JSON, nullable=True)  # Dict[str, Any]

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<UserProfileModel {self.user_id}>"
