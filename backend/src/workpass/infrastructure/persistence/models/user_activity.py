"""
UserActivity ORM Model
Append-only activity timeline
"""
from sqlalchemy import Column, String, Integer, DateTime, JSON, Text, ForeignKey
from sqlalchemy.sql import func

from workpass.core.database import Base


class UserActivityModel(Base):
    """Activity log table ORM model"""

    __tablename__ = "user_activity"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    action = Column(String(100), nullable=False)  # upload_credential, apply_job, ...
    description = Column(Text, nullable=True)
    # "metadata" is reserved on declarative classes
    activity_metadata = Column("metadata", JSON, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    def __repr__(self):
        return f"<UserActivityModel {self.user_id} - {self.action}>"
