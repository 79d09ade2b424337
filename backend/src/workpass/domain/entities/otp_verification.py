"""
OtpVerification Domain Entity
Short-lived, single-use verification code
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from ..enums import OtpChannel


@dataclass(frozen=True)
class OtpVerification:
    """One-time password ledger row - immutable"""

    identifier: str  # email address or phone number
    code: str
    channel: OtpChannel
    expires_at: datetime
    id: Optional[int] = None
    is_used: bool = False
    created_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.identifier:
            raise ValueError("OTP identifier cannot be empty")
        if len(self.code) != 6 or not self.code.isdigit():
            raise ValueError("OTP code must be 6 digits")

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return self.expires_at < (now or datetime.now(timezone.utc))

    def is_consumable(self, now: Optional[datetime] = None) -> bool:
        return not self.is_used and not self.is_expired(now)
