"""
OTP Ledger Repository Implementation
Consumption is one conditional UPDATE so a code can never be used twice
"""
from datetime import datetime

from sqlalchemy import select, update, delete, and_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased
from loguru import logger

from workpass.domain.entities import OtpVerification
from workpass.domain.enums import OtpChannel
from workpass.application.repositories.interfaces import IOtpRepository
from workpass.infrastructure.persistence.models.otp_verification import OtpVerificationModel
from workpass.core.exceptions import RepositoryException


def build_consume_statement(identifier: str, code: str, channel: OtpChannel, now: datetime):
    """
    UPDATE ... SET is_used = true WHERE id = (one matching candidate) RETURNING id

    Concurrent verifiers skip a row another transaction has locked, so two
    requests racing on the same code get exactly one hit between them.
    """
    row = aliased(OtpVerificationModel, name="candidate")
    candidate = (
        select(row.id)
        .where(
            and_(
                row.identifier == identifier,
                row.code == code,
                row.type == channel.value,
                row.is_used.is_(False),
                row.expires_at >= now
            )
        )
        .limit(1)
        .with_for_update(skip_locked=True)
        .scalar_subquery()
    )

    return (
        update(OtpVerificationModel)
        .where(and_(OtpVerificationModel.id == candidate, OtpVerificationModel.is_used.is_(False)))
        .values(is_used=True)
        .returning(OtpVerificationModel.id)
        .execution_options(synchronize_session=False)
    )


class OtpRepository(IOtpRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, otp: OtpVerification) -> OtpVerification:
        try:
            model = OtpVerificationModel(
                identifier=otp.identifier,
                code=otp.code,
                type=otp.channel.value,
                expires_at=otp.expires_at,
                is_used=otp.is_used,
            )
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)
            return self._to_entity(model)

        except Exception as e:
            logger.error(f"Failed to store OTP for {otp.identifier}: {str(e)}")
            raise RepositoryException(f"Failed to store OTP: {str(e)}")

    async def consume(
        self,
        identifier: str,
        code: str,
        channel: OtpChannel,
        now: datetime
    ) -> bool:
        try:
            result = await self.session.execute(
                build_consume_statement(identifier, code, channel, now)
            )
            return result.scalar_one_or_none() is not None

        except Exception as e:
            logger.error(f"Failed to consume OTP for {identifier}: {str(e)}")
            raise RepositoryException(f"Failed to verify OTP: {str(e)}")

    async def delete_expired(self, now: datetime) -> int:
        try:
            result = await self.session.execute(
                delete(OtpVerificationModel)
                .where(OtpVerificationModel.expires_at < now)
                .execution_options(synchronize_session=False)
            )
            return result.rowcount or 0

        except Exception as e:
            logger.error(f"Failed to purge expired OTPs: {str(e)}")
            raise RepositoryException(f"Failed to purge expired OTPs: {str(e)}")

    def _to_entity(self, model: OtpVerificationModel) -> OtpVerification:
        return OtpVerification(
            id=model.id,
            identifier=model.identifier,
            code=model.code,
            channel=OtpChannel(model.type),
            expires_at=model.expires_at,
            is_used=bool(model.is_used),
            created_at=model.created_at
        )
