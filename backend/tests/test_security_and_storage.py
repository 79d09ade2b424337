"""
Tests for identity token verification and upload storage
"""
import io
import time

import pytest
from fastapi import UploadFile
from jose import jwt

from workpass.core.config import settings
from workpass.core.exceptions import AuthenticationException, ValidationException
from workpass.infrastructure.external.file_storage_service import LocalFileStorageService
from workpass.infrastructure.security.jwt_service import IdentityTokenVerifier


SECRET = "test-identity-secret"


def issue_token(claims: dict, key: str = SECRET) -> str:
    payload = {"exp": int(time.time()) + 300, **claims}
    return jwt.encode(payload, key, algorithm="HS256")


class TestIdentityTokenVerifier:
    @pytest.fixture
    def verifier(self):
        return IdentityTokenVerifier(algorithm="HS256", secret=SECRET)

    def test_valid_token_returns_claims(self, verifier):
        claims = verifier.verify_token(issue_token({"sub": "user-1", "email": "worker@example.com"}))
        assert claims["sub"] == "user-1"
        assert claims["email"] == "worker@example.com"

    def test_wrong_signature_is_rejected(self, verifier):
        with pytest.raises(AuthenticationException):
            verifier.verify_token(issue_token({"sub": "user-1"}, key="someone-elses-secret"))

    def test_expired_token_is_rejected(self, verifier):
        token = jwt.encode({"sub": "user-1", "exp": int(time.time()) - 10}, SECRET, algorithm="HS256")
        with pytest.raises(AuthenticationException):
            verifier.verify_token(token)

    def test_token_without_subject_is_rejected(self, verifier):
        with pytest.raises(AuthenticationException):
            verifier.verify_token(issue_token({"email": "worker@example.com"}))

    def test_unconfigured_verifier_rejects_everything(self, monkeypatch):
        monkeypatch.setattr(settings, "IDP_JWT_SECRET", None)
        verifier = IdentityTokenVerifier(algorithm="HS256")
        with pytest.raises(AuthenticationException):
            verifier.verify_token(issue_token({"sub": "user-1"}))


def upload(name: str, content: bytes) -> UploadFile:
    return UploadFile(file=io.BytesIO(content), filename=name)


class TestLocalFileStorageService:
    @pytest.fixture
    def storage(self, tmp_path):
        return LocalFileStorageService(
            base_path=str(tmp_path),
            allowed_extensions=[".pdf", ".jpg", ".jpeg", ".png"],
            max_size_bytes=1024
        )

    @pytest.mark.asyncio
    async def test_saves_under_random_name(self, storage, tmp_path):
        stored = await storage.save_file(upload("White Card.PDF", b"%PDF-1.4 card"))

        assert stored.url.startswith("/uploads/")
        assert stored.url.endswith(".pdf")
        assert stored.name == "White Card.PDF"
        assert stored.size == len(b"%PDF-1.4 card")

        saved = tmp_path / stored.url.rsplit("/", 1)[1]
        assert saved.read_bytes() == b"%PDF-1.4 card"

    @pytest.mark.asyncio
    async def test_rejects_disallowed_extension(self, storage):
        with pytest.raises(ValidationException):
            await storage.save_file(upload("payload.exe", b"MZ"))

    @pytest.mark.asyncio
    async def test_rejects_oversized_file(self, storage):
        with pytest.raises(ValidationException):
            await storage.save_file(upload("scan.png", b"x" * 1025))

    @pytest.mark.asyncio
    async def test_rejects_missing_file(self, storage):
        with pytest.raises(ValidationException):
            await storage.save_file(None)
