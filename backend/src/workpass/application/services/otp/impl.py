"""
OTP Service Implementation
Concrete implementation of IOtpService
"""
import secrets
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from loguru import logger

from workpass.core.config import settings
from workpass.domain.entities import OtpVerification
from workpass.domain.enums import OtpChannel
from workpass.application.repositories.interfaces import IOtpRepository, IUserRepository
from .interfaces import IOtpService, IOtpSender


CODE_MIN = 100000
CODE_MAX = 999999


def generate_code() -> str:
    """Uniform 6-digit code in 100000..999999"""
    return str(CODE_MIN + secrets.randbelow(CODE_MAX - CODE_MIN + 1))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OtpService(IOtpService):
    """OTP ledger service implementation"""

    def __init__(
        self,
        otp_repository: IOtpRepository,
        sender: IOtpSender,
        user_repository: Optional[IUserRepository] = None,
        ttl_minutes: Optional[int] = None,
        clock: Callable[[], datetime] = _utcnow
    ):
        self.otp_repo = otp_repository
        self.sender = sender
        self.user_repo = user_repository
        self.ttl = timedelta(minutes=ttl_minutes if ttl_minutes is not None else settings.OTP_CODE_TTL_MINUTES)
        self.clock = clock

    async def issue(self, identifier: str, channel: OtpChannel) -> str:
        code = generate_code()
        now = self.clock()

        # Earlier outstanding codes for this identifier stay valid until they expire
        await self.otp_repo.create(
            OtpVerification(
                identifier=identifier,
                code=code,
                channel=channel,
                expires_at=now + self.ttl,
            )
        )
        logger.info(f"Issued {channel.value} OTP for {identifier}, expires in {self.ttl}")

        await self.sender.send(identifier, code, channel)
        return code

    async def verify(self, identifier: str, code: str, channel: OtpChannel) -> bool:
        consumed = await self.otp_repo.consume(identifier, code, channel, self.clock())

        if not consumed:
            logger.warning(f"OTP verification failed for {identifier} ({channel.value})")
            return False

        logger.info(f"OTP verified for {identifier} ({channel.value})")
        if self.user_repo is not None:
            await self.user_repo.mark_contact_verified(identifier, channel)
        return True

    async def purge_expired(self) -> int:
        removed = await self.otp_repo.delete_expired(self.clock())
        if removed:
            logger.info(f"Purged {removed} expired OTP record(s)")
        return removed
