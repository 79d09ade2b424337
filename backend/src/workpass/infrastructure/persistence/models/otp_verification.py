"""
OtpVerification ORM Model
Ledger of issued one-time passwords
"""
from sqlalchemy import Column, String, Integer, Boolean, DateTime, Index
from sqlalchemy.sql import func

from workpass.core.database import Base


class OtpVerificationModel(Base):
    """OTP ledger table ORM model"""

    __tablename__ = "otp_verifications"
    __table_args__ = (
        Index("ix_otp_verifications_lookup", "identifier", "type", "code"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)

    identifier = Column(String(255), nullable=False)  # email or phone
    code = Column(String(6), nullable=False)
    type = Column(String(20), nullable=False)  # email or sms

    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
    is_used = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<OtpVerificationModel {self.identifier} ({self.type})>"
