"""
OTP Service Interfaces
Abstract base classes for one-time password issuance and delivery
"""
from abc import ABC, abstractmethod

from workpass.domain.enums import OtpChannel


class IOtpSender(ABC):
    """Delivers an issued code to the user over email or SMS"""

    @abstractmethod
    async def send(self, identifier: str, code: str, channel: OtpChannel) -> None:
        pass


class IOtpService(ABC):
    """OTP ledger service interface"""

    @abstractmethod
    async def issue(self, identifier: str, channel: OtpChannel) -> str:
        """
        Generate, store and dispatch a fresh code

        Returns:
            The 6-digit code
        """
        pass

    @abstractmethod
    async def verify(self, identifier: str, code: str, channel: OtpChannel) -> bool:
        """
        Consume a matching, unused, unexpired code

        Returns:
            True when a code was consumed, False otherwise
        """
        pass

    @abstractmethod
    async def purge_expired(self) -> int:
        """Delete expired codes, returning how many were removed"""
        pass
