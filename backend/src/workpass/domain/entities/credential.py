"""
Credential Domain Entity
Uploaded certification, license or qualification document
"""
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from ..enums import CredentialCategory, VerificationStatus


@dataclass(frozen=True)
class Credential:
    """Credential domain entity - immutable"""

    user_id: str
    type: str  # white_card, first_aid, trade_certificate, license, ...
    category: CredentialCategory
    name: str
    id: Optional[int] = None

    # Issuer details
    issuing_authority: Optional[str] = None
    issue_date: Optional[date] = None
    expiry_date: Optional[date] = None
    certificate_number: Optional[str] = None

    # Attached file reference (staged by the upload handler)
    file_url: Optional[str] = None
    file_name: Optional[str] = None
    file_size: Optional[int] = None

    # Review
    verification_status: VerificationStatus = VerificationStatus.PENDING
    verification_notes: Optional[str] = None

    # Soft delete flag
    is_active: bool = True

    # Timestamps
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate required credential fields"""
        for field_name in ("user_id", "type", "name"):
            value = getattr(self, field_name)
            if not value or len(value.strip()) == 0:
                raise ValueError(f"Credential {field_name} cannot be empty")

        if self.file_size is not None and self.file_size < 0:
            raise ValueError("File size cannot be negative")

    def is_verified(self) -> bool:
        return self.verification_status == VerificationStatus.VERIFIED

    def is_expired(self, today: Optional[date] = None) -> bool:
        """A credential without an expiry date never expires"""
        if self.expiry_date is None:
            return False
        return self.expiry_date <= (today or date.today())

    def counts_towards_readiness(self, today: Optional[date] = None) -> bool:
        """Verified and not yet expired"""
        return self.is_verified() and not self.is_expired(today)

    def expires_within(self, days: int, today: Optional[date] = None) -> bool:
        if self.expiry_date is None:
            return False
        return self.expiry_date <= (today or date.today()) + timedelta(days=days)

    def __str__(self) -> str:
        return f"Credential({self.id}, type={self.type}, status={self.verification_status.value})"
