"""
Dependency Injection Container
Manages service and repository instances
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from workpass.core.database import get_db, get_read_db
from workpass.application.repositories.interfaces import (
    IUserRepository,
    IUserProfileRepository,
    ICredentialRepository,
    IJobRepository,
    IJobApplicationRepository,
    IActivityRepository,
    IOtpRepository,
)
from workpass.application.services.otp.interfaces import IOtpSender, IOtpService
from workpass.application.services.credentials import CredentialService
from workpass.application.services.dashboard import DashboardService
from workpass.application.services.job_applications import JobApplicationService
from workpass.application.services.profiles import ProfileService
from workpass.infrastructure.external.file_storage_service import LocalFileStorageService
from workpass.infrastructure.external.otp_sender import LoggingOtpSender
from workpass.infrastructure.persistence.repositories.activity import ActivityRepository
from workpass.infrastructure.persistence.repositories.credential import CredentialRepository
from workpass.infrastructure.persistence.repositories.job import JobRepository
from workpass.infrastructure.persistence.repositories.job_application import JobApplicationRepository
from workpass.infrastructure.persistence.repositories.otp import OtpRepository
from workpass.infrastructure.persistence.repositories.user import SQLAlchemyUserRepository
from workpass.infrastructure.persistence.repositories.user_profile import UserProfileRepository
from workpass.infrastructure.security.jwt_service import IdentityTokenVerifier


# Singleton instances
_token_verifier: IdentityTokenVerifier | None = None
_otp_sender: IOtpSender | None = None
_file_storage: LocalFileStorageService | None = None


def get_token_verifier() -> IdentityTokenVerifier:
    """Get identity token verifier instance (singleton)"""
    global _token_verifier
    if _token_verifier is None:
        _token_verifier = IdentityTokenVerifier()
    return _token_verifier


def get_otp_sender() -> IOtpSender:
    """Get OTP sender instance (singleton)"""
    global _otp_sender
    if _otp_sender is None:
        _otp_sender = LoggingOtpSender()
    return _otp_sender


def get_file_storage() -> LocalFileStorageService:
    """Get upload storage instance (singleton)"""
    global _file_storage
    if _file_storage is None:
        _file_storage = LocalFileStorageService()
    return _file_storage


# Per-request repositories sharing the request session

def get_user_repository(session: AsyncSession = Depends(get_db)) -> IUserRepository:
    return SQLAlchemyUserRepository(session)


def get_profile_repository(session: AsyncSession = Depends(get_db)) -> IUserProfileRepository:
    return UserProfileRepository(session)


def get_credential_repository(session: AsyncSession = Depends(get_db)) -> ICredentialRepository:
    return CredentialRepository(session)


def get_job_repository(session: AsyncSession = Depends(get_db)) -> IJobRepository:
    return JobRepository(session)


def get_job_application_repository(session: AsyncSession = Depends(get_db)) -> IJobApplicationRepository:
    return JobApplicationRepository(session)


def get_activity_repository(session: AsyncSession = Depends(get_db)) -> IActivityRepository:
    return ActivityRepository(session)


def get_otp_repository(session: AsyncSession = Depends(get_db)) -> IOtpRepository:
    return OtpRepository(session)


# Services

def get_otp_service(
    otp_repo: IOtpRepository = Depends(get_otp_repository),
    user_repo: IUserRepository = Depends(get_user_repository),
    sender: IOtpSender = Depends(get_otp_sender)
) -> IOtpService:
    """Get OTP service instance (per-request)"""
    from workpass.application.services.otp.impl import OtpService
    return OtpService(otp_repo, sender, user_repository=user_repo)


def get_profile_service(
    profile_repo: IUserProfileRepository = Depends(get_profile_repository),
    activity_repo: IActivityRepository = Depends(get_activity_repository)
) -> ProfileService:
    return ProfileService(profile_repo, activity_repo)


def get_credential_service(
    credential_repo: ICredentialRepository = Depends(get_credential_repository),
    activity_repo: IActivityRepository = Depends(get_activity_repository)
) -> CredentialService:
    return CredentialService(credential_repo, activity_repo)


def get_job_application_service(
    job_repo: IJobRepository = Depends(get_job_repository),
    application_repo: IJobApplicationRepository = Depends(get_job_application_repository),
    activity_repo: IActivityRepository = Depends(get_activity_repository)
) -> JobApplicationService:
    return JobApplicationService(job_repo, application_repo, activity_repo)


# The user lookup and score write-back share the request session get_current_user
# upserted on; that row is uncommitted and locked until the request ends.
# The five concurrent reads each get a read-only session of their own.

async def get_dashboard_service(
    user_repo: IUserRepository = Depends(get_user_repository),
    profile_session: AsyncSession = Depends(get_read_db, use_cache=False),
    credential_session: AsyncSession = Depends(get_read_db, use_cache=False),
    expiring_session: AsyncSession = Depends(get_read_db, use_cache=False),
    activity_session: AsyncSession = Depends(get_read_db, use_cache=False),
    application_session: AsyncSession = Depends(get_read_db, use_cache=False)
) -> DashboardService:
    return DashboardService(
        user_repository=user_repo,
        profile_repository=UserProfileRepository(profile_session),
        credential_repository=CredentialRepository(credential_session),
        expiring_credential_repository=CredentialRepository(expiring_session),
        activity_repository=ActivityRepository(activity_session),
        application_repository=JobApplicationRepository(application_session),
    )
