"""
Shared fixtures
"""
import os
import tempfile

# Keep uploads out of the working tree before settings are loaded
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="workpass-uploads-"))

from datetime import date, datetime, timedelta, timezone
from typing import List

import pytest

from workpass.application.repositories.interfaces import IOtpRepository
from workpass.domain.entities import Credential, OtpVerification, User
from workpass.domain.enums import CredentialCategory, VerificationStatus


TODAY = date(2025, 6, 1)


def make_credential(
    type: str,
    status: VerificationStatus = VerificationStatus.VERIFIED,
    expiry_date=None,
    **kwargs
) -> Credential:
    kwargs.setdefault("user_id", "user-1")
    kwargs.setdefault("category", CredentialCategory.SAFETY)
    kwargs.setdefault("name", type.replace("_", " ").title())
    return Credential(type=type, verification_status=status, expiry_date=expiry_date, **kwargs)


class InMemoryOtpRepository(IOtpRepository):
    """Ledger with the same consume/purge semantics as the SQL repository"""

    def __init__(self):
        self.rows: List[dict] = []

    async def create(self, otp: OtpVerification) -> OtpVerification:
        row = {
            "id": len(self.rows) + 1,
            "identifier": otp.identifier,
            "code": otp.code,
            "channel": otp.channel,
            "expires_at": otp.expires_at,
            "is_used": False,
        }
        self.rows.append(row)
        return OtpVerification(
            id=row["id"], identifier=otp.identifier, code=otp.code,
            channel=otp.channel, expires_at=otp.expires_at
        )

    async def consume(self, identifier, code, channel, now) -> bool:
        for row in self.rows:
            if (
                row["identifier"] == identifier
                and row["code"] == code
                and row["channel"] == channel
                and not row["is_used"]
                and row["expires_at"] >= now
            ):
                row["is_used"] = True
                return True
        return False

    async def delete_expired(self, now) -> int:
        before = len(self.rows)
        self.rows = [r for r in self.rows if not r["expires_at"] < now]
        return before - len(self.rows)


class FrozenClock:
    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def otp_repo():
    return InMemoryOtpRepository()


@pytest.fixture
def clock():
    return FrozenClock(datetime(2025, 6, 1, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def user():
    return User(
        id="user-1",
        email="worker@example.com",
        first_name="Sam",
        last_name="Builder",
    )
