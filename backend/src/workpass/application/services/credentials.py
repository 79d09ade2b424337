"""
Credential Service
Credential store operations plus the activity timeline entries they produce
"""
from typing import Any, Dict, List

from loguru import logger

from workpass.core.exceptions import ResourceNotFoundException
from workpass.domain.entities import Credential, UserActivity
from workpass.domain.enums import ActivityAction
from workpass.application.repositories.interfaces import ICredentialRepository, IActivityRepository


class CredentialService:
    def __init__(
        self,
        credential_repository: ICredentialRepository,
        activity_repository: IActivityRepository
    ):
        self.credential_repo = credential_repository
        self.activity_repo = activity_repository

    async def list_credentials(self, user_id: str) -> List[Credential]:
        return await self.credential_repo.list_active(user_id)

    async def upload(self, credential: Credential) -> Credential:
        created = await self.credential_repo.create(credential)

        await self.activity_repo.log(
            UserActivity(
                user_id=created.user_id,
                action=ActivityAction.UPLOAD_CREDENTIAL.value,
                description=f"Uploaded {created.name}",
                metadata={"credentialId": created.id, "type": created.type},
            )
        )
        return created

    async def update(self, user_id: str, credential_id: int, updates: Dict[str, Any]) -> Credential:
        """Partial update of a credential the caller owns"""
        existing = await self.credential_repo.get_by_id(credential_id)
        if not existing or existing.user_id != user_id:
            raise ResourceNotFoundException("Credential", str(credential_id))

        if not updates:
            return existing

        updated = await self.credential_repo.update(credential_id, updates)
        if not updated:
            raise ResourceNotFoundException("Credential", str(credential_id))

        await self.activity_repo.log(
            UserActivity(
                user_id=user_id,
                action=ActivityAction.UPDATE_CREDENTIAL.value,
                description=f"Updated {updated.name}",
                metadata={"credentialId": credential_id, "fields": sorted(updates)},
            )
        )
        return updated

    async def delete(self, user_id: str, credential_id: int) -> None:
        deleted = await self.credential_repo.soft_delete(credential_id, user_id)
        if not deleted:
            logger.warning(f"Delete of credential {credential_id} refused for user {user_id}")
            raise ResourceNotFoundException("Credential", str(credential_id))

        await self.activity_repo.log(
            UserActivity(
                user_id=user_id,
                action=ActivityAction.DELETE_CREDENTIAL.value,
                description="Deleted credential",
                metadata={"credentialId": credential_id},
            )
        )
