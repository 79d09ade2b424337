"""
JobApplication ORM Model
One row per (user, job) pair
"""
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func

from workpass.core.database import Base
from workpass.domain.enums import ApplicationStatus


class JobApplicationModel(Base):
    """Job application table ORM model"""

    __tablename__ = "job_applications"
    __table_args__ = (
        UniqueConstraint("user_id", "job_id", name="uq_job_applications_user_job"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Foreign Keys
    user_id = Column(String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)

    # Application Details
    status = Column(String(50), nullable=False, default=ApplicationStatus.PENDING.value)
    match_score = Column(Integer, nullable=True)  # 0-100 percentage match

    # Timestamps
    applied_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<JobApplicationModel {self.id} - {self.status}>"
