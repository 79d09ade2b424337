"""
OTP Purge Task - Background task deleting expired one-time passwords
Started and cancelled by the application lifespan
"""
import asyncio
from typing import Optional

from loguru import logger

from workpass.core.config import settings
from workpass.core.database import get_db_session
from workpass.application.services.otp.impl import OtpService
from workpass.infrastructure.external.otp_sender import LoggingOtpSender
from workpass.infrastructure.persistence.repositories.otp import OtpRepository


class OtpPurgeTask:
    """Periodically removes expired OTP rows.

    Only rows with expires_at < now are deleted, so a code that a
    concurrent verify could still consume is never touched.
    """

    def __init__(self, interval_seconds: Optional[float] = None):
        self.interval_seconds = (
            interval_seconds if interval_seconds is not None
            else settings.OTP_PURGE_INTERVAL_MINUTES * 60
        )
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="otp-purge")
        logger.info(f"OTP purge task started (interval={self.interval_seconds}s)")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("OTP purge task stopped")

    async def run_once(self) -> int:
        async with get_db_session() as session:
            service = OtpService(OtpRepository(session), LoggingOtpSender())
            return await service.purge_expired()

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_seconds)
            try:
                await self.run_once()
            except Exception as e:
                # Keep the loop alive; the next tick retries
                logger.error(f"OTP purge failed: {e}")
