"""
OTP delivery
No email or SMS provider is wired in; codes are written to the log
"""
from loguru import logger

from workpass.domain.enums import OtpChannel
from workpass.application.services.otp.interfaces import IOtpSender


class LoggingOtpSender(IOtpSender):
    async def send(self, identifier: str, code: str, channel: OtpChannel) -> None:
        logger.info(f"[{channel.value}] OTP for {identifier}: {code}")
