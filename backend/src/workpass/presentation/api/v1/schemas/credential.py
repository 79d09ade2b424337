"""
Credential Request/Response Schemas
Uploads arrive as multipart form fields; updates as JSON
"""
from datetime import date, datetime
from typing import Optional

from pydantic import Field, model_validator

from workpass.domain.enums import CredentialCategory, VerificationStatus
from .base import CamelModel


# Columns that may be changed but never cleared
NON_NULLABLE_FIELDS = ("type", "category", "name", "verification_status")


class CredentialUpdateRequest(CamelModel):
    """Partial update; unset fields are left untouched"""

    type: Optional[str] = Field(None, min_length=1, max_length=100)
    category: Optional[CredentialCategory] = None
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    issuing_authority: Optional[str] = Field(None, max_length=255)
    issue_date: Optional[date] = None
    expiry_date: Optional[date] = None
    certificate_number: Optional[str] = Field(None, max_length=255)
    verification_status: Optional[VerificationStatus] = None
    verification_notes: Optional[str] = None

    @model_validator(mode="after")
    def reject_cleared_required_fields(self):
        for field_name in NON_NULLABLE_FIELDS:
            if field_name in self.model_fields_set and getattr(self, field_name) is None:
                raise ValueError(f"{field_name} cannot be null")
        return self


class CredentialResponse(CamelModel):
    id: int
    user_id: str
    type: str
    category: CredentialCategory
    name: str
    issuing_authority: Optional[str] = None
    issue_date: Optional[date] = None
    expiry_date: Optional[date] = None
    certificate_number: Optional[str] = None
    file_url: Optional[str] = None
    file_name: Optional[str] = None
    file_size: Optional[int] = None
    verification_status: VerificationStatus
    verification_notes: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
