"""
Credential ORM Model
Uploaded certifications and licenses (soft deleted via is_active)
"""
from sqlalchemy import Column, String, Integer, Boolean, Date, DateTime, Text, ForeignKey
from sqlalchemy.sql import func

from workpass.core.database import Base
from workpass.domain.enums import VerificationStatus


class CredentialModel(Base):
    """Credential table ORM model"""

    __tablename__ = "credentials"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    # Classification
    type = Column(String(100), nullable=False)  # white_card, first_aid, trade_certificate, license
    category = Column(String(50), nullable=False)  # safety, trade, medical, license
    name = Column(String(255), nullable=False)

    # Issuer details
    issuing_authority = Column(String(255), nullable=True)
    issue_date = Column(Date, nullable=True)
    expiry_date = Column(Date, nullable=True, index=True)
    certificate_number = Column(String(255), nullable=True)

    # Attached file
    file_url = Column(String(1000), nullable=True)
    file_name = Column(String(500), nullable=True)
    file_size = Column(Integer, nullable=True)

    # Review
    verification_status = Column(String(50), nullable=False, default=VerificationStatus.PENDING.value)
    verification_notes = Column(Text, nullable=True)

    # Soft delete
    is_active = Column(Boolean, nullable=False, default=True, index=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<CredentialModel {self.id} - {self.type}>"
