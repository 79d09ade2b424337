"""
Job ORM Model
SQLAlchemy model for job postings
"""
from sqlalchemy import Column, String, Integer, Boolean, Date, DateTime, JSON, Text
from sqlalchemy.sql import func

from workpass.core.database import Base


class JobModel(Base):
    """Job posting table ORM model"""

    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Basic Info
    title = Column(String(500), nullable=False, index=True)
    company = Column(String(255), nullable=False)
    location = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)

    # Job Details
    requirements = Column(JSON, nullable=True)  # required credentials / skills
    pay_range = Column(String(100), nullable=True)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    job_type = Column(String(50), nullable=True)  # permanent, contract, casual

    # Status
    is_active = Column(Boolean, nullable=False, default=True, index=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<JobModel {self.title} at {self.company}>"
