"""
Credential Endpoints
Upload, list, update and soft-delete of credential documents
"""
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from loguru import logger

from workpass.application.services.credentials import CredentialService
from workpass.core.exceptions import ValidationException
from workpass.domain.entities import Credential, User
from workpass.domain.enums import CredentialCategory
from workpass.infrastructure.external.file_storage_service import LocalFileStorageService
from workpass.presentation.api.v1.container import get_credential_service, get_file_storage
from workpass.presentation.api.v1.dependencies import get_current_user
from workpass.presentation.api.v1.schemas.base import MessageResponse
from workpass.presentation.api.v1.schemas.credential import CredentialResponse, CredentialUpdateRequest


router = APIRouter()


@router.get("/credentials", response_model=List[CredentialResponse])
async def list_credentials(
    user: User = Depends(get_current_user),
    service: CredentialService = Depends(get_credential_service)
):
    credentials = await service.list_credentials(user.id)
    return [CredentialResponse.model_validate(c) for c in credentials]


@router.post("/credentials", response_model=CredentialResponse)
async def upload_credential(
    file: Optional[UploadFile] = File(None),
    type: str = Form(..., min_length=1, max_length=100),
    category: CredentialCategory = Form(...),
    name: str = Form(..., min_length=1, max_length=255),
    issuing_authority: Optional[str] = Form(None, alias="issuingAuthority"),
    issue_date: Optional[date] = Form(None, alias="issueDate"),
    expiry_date: Optional[date] = Form(None, alias="expiryDate"),
    certificate_number: Optional[str] = Form(None, alias="certificateNumber"),
    user: User = Depends(get_current_user),
    storage: LocalFileStorageService = Depends(get_file_storage),
    service: CredentialService = Depends(get_credential_service)
):
    """
    Upload a credential document

    The file is validated (type, size) and staged before the credential
    row is written with a reference to it. The staged file is removed again
    if the credential is rejected or cannot be stored.
    """
    if issue_date and expiry_date and expiry_date < issue_date:
        raise ValidationException("expiryDate", "Expiry date cannot be before issue date")

    stored = await storage.save_file(file)

    try:
        created = await service.upload(_build_credential(
            user_id=user.id,
            type=type,
            category=category,
            name=name,
            issuing_authority=issuing_authority,
            issue_date=issue_date,
            expiry_date=expiry_date,
            certificate_number=certificate_number,
            file_url=stored.url,
            file_name=stored.name,
            file_size=stored.size,
        ))
    except Exception:
        await storage.delete_file(stored)
        raise

    logger.info(f"User {user.id} uploaded credential {created.id}")
    return CredentialResponse.model_validate(created)


def _build_credential(**fields) -> Credential:
    try:
        return Credential(**fields)
    except ValueError as e:
        raise ValidationException("credential", str(e))


@router.put("/credentials/{credential_id}", response_model=CredentialResponse)
async def update_credential(
    credential_id: int,
    body: CredentialUpdateRequest,
    user: User = Depends(get_current_user),
    service: CredentialService = Depends(get_credential_service)
):
    updated = await service.update(user.id, credential_id, body.model_dump(exclude_unset=True))
    return CredentialResponse.model_validate(updated)


@router.delete("/credentials/{credential_id}", response_model=MessageResponse)
async def delete_credential(
    credential_id: int,
    user: User = Depends(get_current_user),
    service: CredentialService = Depends(get_credential_service)
):
    await service.delete(user.id, credential_id)
    return MessageResponse(message="Credential deleted successfully")
