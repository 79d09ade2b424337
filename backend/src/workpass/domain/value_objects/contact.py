"""
ContactIdentifier Value Object
The email address or phone number a one-time code is sent to
"""
import re
from dataclasses import dataclass

from workpass.domain.enums import OtpChannel


EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')
PHONE_PATTERN = re.compile(r'^\+?[0-9][0-9 -]{5,18}[0-9]$')


@dataclass(frozen=True)
class ContactIdentifier:
    """
    Stored exactly as given. Verification flips the flag of the user whose
    email or phone equals this value, so no normalization happens here.
    """

    value: str
    channel: OtpChannel

    def __post_init__(self):
        if not self.is_valid(self.value, self.channel):
            raise ValueError(f"Invalid {self.channel.value} identifier: {self.value}")

    @staticmethod
    def is_valid(value: str, channel: OtpChannel) -> bool:
        pattern = EMAIL_PATTERN if channel == OtpChannel.EMAIL else PHONE_PATTERN
        return bool(pattern.match(value or ""))

    def __str__(self) -> str:
        return self.value
