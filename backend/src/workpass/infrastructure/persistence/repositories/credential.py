"""
Credential Repository Implementation
Active-only listings; deletes are soft (is_active = false)
"""
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from sqlalchemy import select, update, and_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func
from loguru import logger

from workpass.domain.entities import Credential
from workpass.domain.enums import CredentialCategory, VerificationStatus
from workpass.application.repositories.interfaces import ICredentialRepository
from workpass.infrastructure.persistence.models.credential import CredentialModel
from workpass.infrastructure.persistence.repositories._values import column_values
from workpass.core.exceptions import RepositoryException


class CredentialRepository(ICredentialRepository):
    """SQLAlchemy credential store"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_active(self, user_id: str) -> List[Credential]:
        try:
            result = await self.session.execute(
                select(CredentialModel)
                .where(and_(CredentialModel.user_id == user_id, CredentialModel.is_active.is_(True)))
                .order_by(CredentialModel.created_at.desc())
            )
            return [self._to_entity(m) for m in result.scalars().all()]

        except Exception as e:
            logger.error(f"Failed to list credentials for user {user_id}: {str(e)}")
            raise RepositoryException(f"Failed to list credentials: {str(e)}")

    async def get_by_id(self, credential_id: int) -> Optional[Credential]:
        try:
            result = await self.session.execute(
                select(CredentialModel).where(CredentialModel.id == credential_id)
            )
            model = result.scalar_one_or_none()
            return self._to_entity(model) if model else None

        except Exception as e:
            logger.error(f"Failed to get credential {credential_id}: {str(e)}")
            raise RepositoryException(f"Failed to get credential: {str(e)}")

    async def create(self, credential: Credential) -> Credential:
        try:
            model = self._to_model(credential)
            self.session.add(model)
            await self.session.flush()
            await self.session.refresh(model)

            logger.info(f"Stored credential {model.id} ({model.type}) for user {model.user_id}")
            return self._to_entity(model)

        except Exception as e:
            logger.error(f"Failed to create credential for user {credential.user_id}: {str(e)}")
            raise RepositoryException(f"Failed to create credential: {str(e)}")

    async def update(self, credential_id: int, updates: Dict[str, Any]) -> Optional[Credential]:
        try:
            result = await self.session.execute(
                update(CredentialModel)
                .where(CredentialModel.id == credential_id)
                .values(**column_values(updates), updated_at=func.now())
                .returning(CredentialModel)
                .execution_options(synchronize_session=False, populate_existing=True)
            )
            model = result.scalar_one_or_none()
            return self._to_entity(model) if model else None

        except Exception as e:
            logger.error(f"Failed to update credential {credential_id}: {str(e)}")
            raise RepositoryException(f"Failed to update credential: {str(e)}")

    async def soft_delete(self, credential_id: int, user_id: str) -> bool:
        """Single conditional UPDATE scoped to the owner"""
        try:
            result = await self.session.execute(
                update(CredentialModel)
                .where(and_(CredentialModel.id == credential_id, CredentialModel.user_id == user_id))
                .values(is_active=False, updated_at=func.now())
                .execution_options(synchronize_session=False)
            )
            return result.rowcount > 0

        except Exception as e:
            logger.error(f"Failed to delete credential {credential_id}: {str(e)}")
            raise RepositoryException(f"Failed to delete credential: {str(e)}")

    async def list_expiring_within(self, user_id: str, days: int) -> List[Credential]:
        cutoff = date.today() + timedelta(days=days)
        try:
            result = await self.session.execute(
                select(CredentialModel)
                .where(
                    and_(
                        CredentialModel.user_id == user_id,
                        CredentialModel.is_active.is_(True),
                        CredentialModel.expiry_date <= cutoff
                    )
                )
                .order_by(CredentialModel.expiry_date.asc())
            )
            return [self._to_entity(m) for m in result.scalars().all()]

        except Exception as e:
            logger.error(f"Failed to list expiring credentials for user {user_id}: {str(e)}")
            raise RepositoryException(f"Failed to list expiring credentials: {str(e)}")

    def _to_model(self, entity: Credential) -> CredentialModel:
        return CredentialModel(
            user_id=entity.user_id,
            type=entity.type,
            category=entity.category.value,
            name=entity.name,
            issuing_authority=entity.issuing_authority,
            issue_date=entity.issue_date,
            expiry_date=entity.expiry_date,
            certificate_number=entity.certificate_number,
            file_url=entity.file_url,
            file_name=entity.file_name,
            file_size=entity.file_size,
            verification_status=entity.verification_status.value,
            verification_notes=entity.verification_notes,
            is_active=entity.is_active,
        )

    def _to_entity(self, model: CredentialModel) -> Credential:
        return Credential(
            id=model.id,
            user_id=model.user_id,
            type=model.type,
            category=CredentialCategory(model.category),
            name=model.name,
            issuing_authority=model.issuing_authority,
            issue_date=model.issue_date,
            expiry_date=model.expiry_date,
            certificate_number=model.certificate_number,
            file_url=model.file_url,
            file_name=model.file_name,
            file_size=model.file_size,
            verification_status=VerificationStatus(model.verification_status or VerificationStatus.PENDING.value),
            verification_notes=model.verification_notes,
            is_active=bool(model.is_active),
            created_at=model.created_at,
            updated_at=model.updated_at
        )
