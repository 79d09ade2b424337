"""
Repository Interfaces (Abstract Base Classes)
Define contracts for data access without implementation details
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, Dict, List, Optional

from workpass.domain.entities import (
    User,
    UserProfile,
    Credential,
    Job,
    JobApplication,
    JobApplicationWithJob,
    UserActivity,
    OtpVerification,
)
from workpass.domain.enums import OtpChannel


class IUserRepository(ABC):
    """User repository interface"""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def upsert(self, user: User) -> User:
        """Insert the user, or refresh identity fields if the id exists"""
        pass

    @abstractmethod
    async def update_work_readiness_score(self, user_id: str, score: int) -> bool:
        """Persist the derived score on the user row"""
        pass

    @abstractmethod
    async def mark_contact_verified(self, identifier: str, channel: OtpChannel) -> int:
        """Flip the email/phone verified flag for users owning the identifier"""
        pass


class IUserProfileRepository(ABC):
    """User profile repository interface"""

    @abstractmethod
    async def get_by_user_id(self, user_id: str) -> Optional[UserProfile]:
        pass

    @abstractmethod
    async def create(self, profile: UserProfile) -> UserProfile:
        pass

    @abstractmethod
    async def update(self, user_id: str, updates: Dict[str, Any]) -> Optional[UserProfile]:
        pass


class ICredentialRepository(ABC):
    """Credential store interface"""

    @abstractmethod
    async def list_active(self, user_id: str) -> List[Credential]:
        """Active credentials, newest first"""
        pass

    @abstractmethod
    async def get_by_id(self, credential_id: int) -> Optional[Credential]:
        pass

    @abstractmethod
    async def create(self, credential: Credential) -> Credential:
        pass

    @abstractmethod
    async def update(self, credential_id: int, updates: Dict[str, Any]) -> Optional[Credential]:
        """Partial update; None when the credential does not exist"""
        pass

    @abstractmethod
    async def soft_delete(self, credential_id: int, user_id: str) -> bool:
        """Deactivate a credential owned by user_id; False when not found/owned"""
        pass

    @abstractmethod
    async def list_expiring_within(self, user_id: str, days: int) -> List[Credential]:
        """Active credentials expiring on or before today + days, soonest first"""
        pass


class IJobRepository(ABC):
    """Job repository interface"""

    @abstractmethod
    async def list_active(self, limit: int) -> List[Job]:
        pass

    @abstractmethod
    async def get_by_id(self, job_id: int) -> Optional[Job]:
        pass

    @abstractmethod
    async def create(self, job: Job) -> Job:
        pass


class IJobApplicationRepository(ABC):
    """Job application repository interface"""

    @abstractmethod
    async def get(self, user_id: str, job_id: int) -> Optional[JobApplication]:
        pass

    @abstractmethod
    async def create(self, application: JobApplication) -> JobApplication:
        """Insert; raises DuplicateResourceException on the (user, job) constraint"""
        pass

    @abstractmethod
    async def list_with_jobs(self, user_id: str) -> List[JobApplicationWithJob]:
        """Applications joined with their jobs, newest first"""
        pass


class IActivityRepository(ABC):
    """Activity timeline repository interface"""

    @abstractmethod
    async def list_recent(self, user_id: str, limit: int) -> List[UserActivity]:
        pass

    @abstractmethod
    async def log(self, activity: UserActivity) -> UserActivity:
        pass


class IOtpRepository(ABC):
    """OTP ledger repository interface"""

    @abstractmethod
    async def create(self, otp: OtpVerification) -> OtpVerification:
        pass

    @abstractmethod
    async def consume(
        self,
        identifier: str,
        code: str,
        channel: OtpChannel,
        now: datetime
    ) -> bool:
        """Atomically mark one matching, unused, unexpired code as used"""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete rows with expires_at < now, returning the count"""
        pass
