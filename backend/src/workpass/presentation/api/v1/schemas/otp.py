"""
OTP Request Schemas
"""
from pydantic import Field, model_validator

from workpass.domain.enums import OtpChannel
from workpass.domain.value_objects import ContactIdentifier
from .base import CamelModel


class SendOtpRequest(CamelModel):
    identifier: str = Field(..., min_length=1, max_length=255)
    type: OtpChannel

    @model_validator(mode="after")
    def validate_identifier(self):
        if not ContactIdentifier.is_valid(self.identifier, self.type):
            raise ValueError(f"identifier must be a valid {self.type.value} contact")
        return self


class VerifyOtpRequest(CamelModel):
    identifier: str = Field(..., min_length=1, max_length=255)
    code: str = Field(..., min_length=1, max_length=6)
    type: OtpChannel
