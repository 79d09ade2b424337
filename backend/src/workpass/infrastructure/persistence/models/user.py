"""
User ORM Model
SQLAlchemy model for persistence
"""
from sqlalchemy import Column, String, Integer, Boolean, DateTime
from sqlalchemy.sql import func

from workpass.core.database import Base


class UserModel(Base):
    """User table ORM model (mirrored from the identity provider)"""

    __tablename__ = "users"

    # Primary Key (identity provider subject)
    id = Column(String(255), primary_key=True)

    # Contact
    email = Column(String(255), unique=True, nullable=True, index=True)
    phone = Column(String(50), nullable=True, index=True)

    # Personal Information
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    profile_image_url = Column(String(1000), nullable=True)

    # Site role
    role = Column(String(50), nullable=True)  # tradesperson, supervisor, foreman, apprentice
    experience_level = Column(String(50), nullable=True)  # entry, mid, senior

    # Verification
    is_email_verified = Column(Boolean, nullable=False, default=False)
    is_phone_verified = Column(Boolean, nullable=False, default=False)

    # Derived score, only written when persistence is enabled
    work_readiness_score = Column(Integer, nullable=False, default=0)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<UserModel {self.id}>"
