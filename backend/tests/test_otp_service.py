"""
Tests for the OTP ledger service
"""
from unittest.mock import AsyncMock, patch

import pytest

from workpass.application.services.otp.impl import OtpService, generate_code, CODE_MIN, CODE_MAX
from workpass.domain.enums import OtpChannel


IDENTIFIER = "worker@example.com"


@pytest.fixture
def sender():
    return AsyncMock()


@pytest.fixture
def user_repo():
    repo = AsyncMock()
    repo.mark_contact_verified.return_value = 1
    return repo


@pytest.fixture
def service(otp_repo, sender, user_repo, clock):
    return OtpService(otp_repo, sender, user_repository=user_repo, ttl_minutes=10, clock=clock)


class TestCodeGeneration:
    def test_codes_are_six_digits(self):
        for _ in range(1000):
            code = generate_code()
            assert len(code) == 6 and code.isdigit()
            assert CODE_MIN <= int(code) <= CODE_MAX

    def test_range_bounds(self):
        with patch("workpass.application.services.otp.impl.secrets.randbelow", return_value=0):
            assert generate_code() == "100000"
        with patch("workpass.application.services.otp.impl.secrets.randbelow", return_value=899999):
            assert generate_code() == "999999"


class TestOtpService:
    """Issue / verify / purge"""

    @pytest.mark.asyncio
    async def test_issue_stores_row_and_sends(self, service, otp_repo, sender, clock):
        code = await service.issue(IDENTIFIER, OtpChannel.EMAIL)

        assert len(otp_repo.rows) == 1
        row = otp_repo.rows[0]
        assert row["code"] == code
        assert row["is_used"] is False
        assert (row["expires_at"] - clock.now).total_seconds() == 600
        sender.send.assert_awaited_once_with(IDENTIFIER, code, OtpChannel.EMAIL)

    @pytest.mark.asyncio
    async def test_verify_is_single_use(self, service, user_repo):
        code = await service.issue(IDENTIFIER, OtpChannel.EMAIL)

        assert await service.verify(IDENTIFIER, code, OtpChannel.EMAIL) is True
        assert await service.verify(IDENTIFIER, code, OtpChannel.EMAIL) is False
        user_repo.mark_contact_verified.assert_awaited_once_with(IDENTIFIER, OtpChannel.EMAIL)

    @pytest.mark.asyncio
    async def test_known_code_example(self, service, otp_repo):
        with patch("workpass.application.services.otp.impl.generate_code", return_value="483920"):
            code = await service.issue(IDENTIFIER, OtpChannel.EMAIL)

        assert code == "483920"
        assert await service.verify(IDENTIFIER, "483920", OtpChannel.EMAIL) is True
        assert await service.verify(IDENTIFIER, "483920", OtpChannel.EMAIL) is False

    @pytest.mark.asyncio
    async def test_valid_until_expiry_instant(self, service, clock):
        code = await service.issue(IDENTIFIER, OtpChannel.SMS)
        clock.advance(minutes=10)
        assert await service.verify(IDENTIFIER, code, OtpChannel.SMS) is True

    @pytest.mark.asyncio
    async def test_expired_code_is_rejected(self, service, otp_repo, clock, user_repo):
        code = await service.issue(IDENTIFIER, OtpChannel.SMS)
        clock.advance(minutes=10, seconds=1)

        assert await service.verify(IDENTIFIER, code, OtpChannel.SMS) is False
        assert otp_repo.rows[0]["is_used"] is False
        user_repo.mark_contact_verified.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("identifier, code_override, channel", [
        ("other@example.com", None, OtpChannel.EMAIL),
        (IDENTIFIER, "000000", OtpChannel.EMAIL),
        (IDENTIFIER, None, OtpChannel.SMS),
    ])
    async def test_mismatch_is_rejected(self, service, otp_repo, identifier, code_override, channel):
        code = await service.issue(IDENTIFIER, OtpChannel.EMAIL)

        assert await service.verify(identifier, code_override or code, channel) is False
        assert otp_repo.rows[0]["is_used"] is False

    @pytest.mark.asyncio
    async def test_earlier_codes_remain_valid_after_resend(self, service):
        first = await service.issue(IDENTIFIER, OtpChannel.EMAIL)
        second = await service.issue(IDENTIFIER, OtpChannel.EMAIL)

        assert await service.verify(IDENTIFIER, second, OtpChannel.EMAIL) is True
        assert await service.verify(IDENTIFIER, first, OtpChannel.EMAIL) is True

    @pytest.mark.asyncio
    async def test_purge_removes_only_expired(self, service, otp_repo, clock):
        await service.issue(IDENTIFIER, OtpChannel.EMAIL)
        clock.advance(minutes=5)
        live = await service.issue(IDENTIFIER, OtpChannel.SMS)
        clock.advance(minutes=6)

        assert await service.purge_expired() == 1
        assert [r["code"] for r in otp_repo.rows] == [live]
        assert await service.purge_expired() == 0

    @pytest.mark.asyncio
    async def test_verify_without_user_repository(self, otp_repo, sender, clock):
        service = OtpService(otp_repo, sender, ttl_minutes=10, clock=clock)
        code = await service.issue(IDENTIFIER, OtpChannel.EMAIL)
        assert await service.verify(IDENTIFIER, code, OtpChannel.EMAIL) is True
