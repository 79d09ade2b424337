"""
Endpoint tests with FastAPI TestClient and dependency overrides
"""
from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from workpass.main import app
from workpass.core.config import settings
from workpass.core.database import get_db, get_read_db
from workpass.core.exceptions import (
    DuplicateResourceException,
    RepositoryException,
    ResourceNotFoundException,
)
from workpass.domain.entities import (
    Dashboard,
    Job,
    JobApplication,
    JobApplicationWithJob,
    UserProfile,
)
from workpass.domain.enums import OtpChannel
from workpass.domain.value_objects import MatchScore
from workpass.infrastructure.external.file_storage_service import LocalFileStorageService
from workpass.infrastructure.persistence.repositories.activity import ActivityRepository
from workpass.infrastructure.persistence.repositories.credential import CredentialRepository
from workpass.infrastructure.persistence.repositories.job_application import JobApplicationRepository
from workpass.infrastructure.persistence.repositories.user import SQLAlchemyUserRepository
from workpass.infrastructure.persistence.repositories.user_profile import UserProfileRepository
from workpass.presentation.api.v1 import container
from workpass.presentation.api.v1.dependencies import get_current_user, limiter
from conftest import make_credential


@pytest.fixture
def client(user):
    app.dependency_overrides[get_current_user] = lambda: user
    limiter.reset()
    yield TestClient(app)
    app.dependency_overrides.clear()


def override(dependency, value):
    app.dependency_overrides[dependency] = lambda: value
    return value


class TestAuthAndProfile:
    def test_missing_bearer_token_is_401(self):
        app.dependency_overrides.clear()
        response = TestClient(app).get("/api/auth/user")
        assert response.status_code == 401

    def test_current_user_is_camel_cased(self, client):
        response = client.get("/api/auth/user")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == "user-1"
        assert body["firstName"] == "Sam"
        assert body["isEmailVerified"] is False

    def test_profile_absent_is_null(self, client):
        service = override(container.get_profile_service, AsyncMock())
        service.get_profile.return_value = None

        response = client.get("/api/profile")

        assert response.status_code == 200
        assert response.json() is None

    def test_profile_save_passes_only_sent_fields(self, client):
        service = override(container.get_profile_service, AsyncMock())
        service.save_profile.return_value = UserProfile(user_id="user-1", id=1, trade="plumber", years_experience=4)

        response = client.post("/api/profile", json={"trade": "plumber", "yearsExperience": 4})

        assert response.status_code == 200
        assert response.json()["yearsExperience"] == 4
        service.save_profile.assert_awaited_once_with("user-1", {"trade": "plumber", "years_experience": 4})

    def test_profile_invalid_body_is_400(self, client):
        override(container.get_profile_service, AsyncMock())
        response = client.post("/api/profile", json={"yearsExperience": -3})
        assert response.status_code == 400


class TestCredentialEndpoints:
    @pytest.fixture
    def service(self, client):
        return override(container.get_credential_service, AsyncMock())

    @pytest.fixture
    def storage(self, tmp_path):
        return override(container.get_file_storage, LocalFileStorageService(base_path=str(tmp_path)))

    def test_list(self, client, service):
        service.list_credentials.return_value = [make_credential("white_card", id=1)]

        response = client.get("/api/credentials")

        assert response.status_code == 200
        assert response.json()[0]["verificationStatus"] == "verified"

    def test_upload(self, client, service, storage):
        service.upload.side_effect = lambda c: make_credential(
            c.type, id=12, name=c.name, file_url=c.file_url, file_name=c.file_name, file_size=c.file_size,
            expiry_date=c.expiry_date
        )

        response = client.post(
            "/api/credentials",
            files={"file": ("white-card.pdf", b"%PDF-1.4", "application/pdf")},
            data={"type": "white_card", "category": "safety", "name": "White Card", "expiryDate": "2030-01-31"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == 12
        assert body["fileName"] == "white-card.pdf"
        assert body["fileUrl"].startswith("/uploads/")
        assert body["expiryDate"] == "2030-01-31"

        stored = service.upload.await_args.args[0]
        assert stored.user_id == "user-1"
        assert stored.expiry_date == date(2030, 1, 31)

    def test_upload_without_file_is_400(self, client, service, storage):
        response = client.post(
            "/api/credentials",
            data={"type": "white_card", "category": "safety", "name": "White Card"},
        )
        assert response.status_code == 400
        service.upload.assert_not_awaited()

    def test_upload_with_bad_extension_is_400(self, client, service, storage):
        response = client.post(
            "/api/credentials",
            files={"file": ("card.exe", b"MZ", "application/octet-stream")},
            data={"type": "white_card", "category": "safety", "name": "White Card"},
        )
        assert response.status_code == 400

    def test_upload_with_unknown_category_is_400(self, client, service, storage):
        response = client.post(
            "/api/credentials",
            files={"file": ("card.pdf", b"%PDF", "application/pdf")},
            data={"type": "white_card", "category": "astrology", "name": "White Card"},
        )
        assert response.status_code == 400

    def test_rejected_credential_leaves_no_file_behind(self, client, service, storage, tmp_path):
        response = client.post(
            "/api/credentials",
            files={"file": ("card.pdf", b"%PDF", "application/pdf")},
            data={"type": "white_card", "category": "safety", "name": "   "},
        )

        assert response.status_code == 400
        assert response.json()["field"] == "credential"
        service.upload.assert_not_awaited()
        assert list(tmp_path.iterdir()) == []

    def test_failed_insert_leaves_no_file_behind(self, client, service, storage, tmp_path):
        service.upload.side_effect = RepositoryException("Failed to create credential: boom")

        response = client.post(
            "/api/credentials",
            files={"file": ("card.pdf", b"%PDF", "application/pdf")},
            data={"type": "white_card", "category": "safety", "name": "White Card"},
        )

        assert response.status_code == 500
        assert list(tmp_path.iterdir()) == []

    def test_update_not_found_is_404(self, client, service):
        service.update.side_effect = ResourceNotFoundException("Credential", "5")

        response = client.put("/api/credentials/5", json={"name": "Renamed"})

        assert response.status_code == 404
        service.update.assert_awaited_once_with("user-1", 5, {"name": "Renamed"})

    def test_update_cannot_clear_name(self, client, service):
        response = client.put("/api/credentials/5", json={"name": None})
        assert response.status_code == 400
        service.update.assert_not_awaited()

    def test_delete(self, client, service):
        response = client.delete("/api/credentials/5")

        assert response.status_code == 200
        assert "message" in response.json()
        service.delete.assert_awaited_once_with("user-1", 5)

    def test_delete_not_owned_is_404(self, client, service):
        service.delete.side_effect = ResourceNotFoundException("Credential", "5")
        assert client.delete("/api/credentials/5").status_code == 404


class TestJobEndpoints:
    def test_list_uses_default_limit(self, client):
        repo = override(container.get_job_repository, AsyncMock())
        repo.list_active.return_value = [Job(id=1, title="Rigger", company="Acme Build", location="Darwin")]

        response = client.get("/api/jobs")

        assert response.status_code == 200
        assert response.json()[0]["title"] == "Rigger"
        repo.list_active.assert_awaited_once_with(50)

    def test_unknown_job_is_404(self, client):
        repo = override(container.get_job_repository, AsyncMock())
        repo.get_by_id.return_value = None
        assert client.get("/api/jobs/404").status_code == 404

    def test_apply(self, client):
        service = override(container.get_job_application_service, AsyncMock())
        service.apply.return_value = JobApplication(user_id="user-1", job_id=3, id=1, match_score=MatchScore(80))

        response = client.post("/api/job-applications", json={"jobId": 3, "matchScore": 80})

        assert response.status_code == 200
        assert response.json()["status"] == "pending"
        assert response.json()["matchScore"] == 80
        service.apply.assert_awaited_once_with("user-1", 3, match_score=MatchScore(80))

    def test_duplicate_application_is_400(self, client):
        service = override(container.get_job_application_service, AsyncMock())
        service.apply.side_effect = DuplicateResourceException(
            "JobApplication", "job_id", "3", message="Already applied to this job"
        )

        response = client.post("/api/job-applications", json={"jobId": 3})

        assert response.status_code == 400
        assert response.json()["detail"] == "Already applied to this job"

    def test_applications_include_job(self, client):
        service = override(container.get_job_application_service, AsyncMock())
        job = Job(id=3, title="Scaffolder", company="Acme Build", location="Hobart")
        service.list_applications.return_value = [
            JobApplicationWithJob(JobApplication(user_id="user-1", job_id=3, id=1), job)
        ]

        response = client.get("/api/job-applications")

        assert response.status_code == 200
        assert response.json()[0]["job"]["title"] == "Scaffolder"
        assert response.json()[0]["jobId"] == 3


class TestDashboardEndpoint:
    def test_payload(self, client, user):
        service = override(container.get_dashboard_service, AsyncMock())
        credentials = [make_credential("white_card", id=1), make_credential("first_aid", id=2)]
        service.get_dashboard.return_value = Dashboard(
            user=user,
            profile=None,
            credentials=credentials,
            expiring_credentials=[],
            recent_activity=[],
            job_applications=[],
            work_readiness_score=60,
        )

        response = client.get("/api/dashboard")

        assert response.status_code == 200
        body = response.json()
        assert body["workReadinessScore"] == 60
        assert len(body["credentials"]) == 2
        assert body["expiringCredentials"] == []
        assert body["profile"] is None

    def test_missing_user_is_404(self, client):
        service = override(container.get_dashboard_service, AsyncMock())
        service.get_dashboard.side_effect = ResourceNotFoundException("User", "user-1")
        assert client.get("/api/dashboard").status_code == 404

    def test_storage_failure_is_generic_500(self, client):
        service = override(container.get_dashboard_service, AsyncMock())
        service.get_dashboard.side_effect = RepositoryException("Failed to list credentials: boom")

        response = client.get("/api/dashboard")

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal server error"}


class TestOtpEndpoints:
    def test_send(self, client):
        service = override(container.get_otp_service, AsyncMock())

        response = client.post("/api/send-otp", json={"identifier": "worker@example.com", "type": "email"})

        assert response.status_code == 200
        service.issue.assert_awaited_once_with("worker@example.com", OtpChannel.EMAIL)

    @pytest.mark.parametrize("body", [
        {"identifier": "worker@example.com"},
        {"type": "sms"},
        {"identifier": "not-an-email", "type": "email"},
        {"identifier": "call me", "type": "sms"},
        {"identifier": "0400000000", "type": "pigeon"},
    ])
    def test_send_invalid_body_is_400(self, client, body):
        service = override(container.get_otp_service, AsyncMock())
        assert client.post("/api/send-otp", json=body).status_code == 400
        service.issue.assert_not_awaited()

    def test_verify_success(self, client):
        service = override(container.get_otp_service, AsyncMock())
        service.verify.return_value = True

        response = client.post(
            "/api/verify-otp",
            json={"identifier": "0400000000", "code": "483920", "type": "sms"},
        )

        assert response.status_code == 200
        service.verify.assert_awaited_once_with("0400000000", "483920", OtpChannel.SMS)

    def test_verify_failure_is_400(self, client):
        service = override(container.get_otp_service, AsyncMock())
        service.verify.return_value = False

        response = client.post(
            "/api/verify-otp",
            json={"identifier": "worker@example.com", "code": "000000", "type": "email"},
        )

        assert response.status_code == 400

    def test_send_is_rate_limited(self, client):
        override(container.get_otp_service, AsyncMock())
        body = {"identifier": "worker@example.com", "type": "email"}

        statuses = [client.post("/api/send-otp", json=body).status_code for _ in range(6)]

        assert statuses[:5] == [200] * 5
        assert statuses[5] == 429


class TestDashboardSessionWiring:
    """Real get_current_user and get_dashboard_service over recorded sessions"""

    READS = ("profile", "credentials", "expiring", "activity", "applications")

    @pytest.fixture
    def wiring(self, monkeypatch, user):
        request_sessions, read_sessions, calls = [], [], {}

        async def fake_get_db():
            session = object()
            request_sessions.append(session)
            yield session

        async def fake_get_read_db():
            session = object()
            read_sessions.append(session)
            yield session

        def recorder(name, result):
            async def method(self, *args):
                calls[name] = self.session
                return result
            return method

        verifier = MagicMock()
        verifier.verify_token.return_value = {"sub": user.id, "email": user.email}

        app.dependency_overrides.clear()
        app.dependency_overrides[get_db] = fake_get_db
        app.dependency_overrides[get_read_db] = fake_get_read_db
        app.dependency_overrides[container.get_token_verifier] = lambda: verifier

        monkeypatch.setattr(settings, "PERSIST_WORK_READINESS_SCORE", True)
        monkeypatch.setattr(SQLAlchemyUserRepository, "upsert", recorder("upsert", user))
        monkeypatch.setattr(SQLAlchemyUserRepository, "get_by_id", recorder("get_by_id", user))
        monkeypatch.setattr(SQLAlchemyUserRepository, "update_work_readiness_score", recorder("update_score", True))
        monkeypatch.setattr(UserProfileRepository, "get_by_user_id", recorder("profile", None))
        monkeypatch.setattr(
            CredentialRepository, "list_active", recorder("credentials", [make_credential("white_card", id=1)])
        )
        monkeypatch.setattr(CredentialRepository, "list_expiring_within", recorder("expiring", []))
        monkeypatch.setattr(ActivityRepository, "list_recent", recorder("activity", []))
        monkeypatch.setattr(JobApplicationRepository, "list_with_jobs", recorder("applications", []))

        yield request_sessions, read_sessions, calls
        app.dependency_overrides.clear()

    def test_user_lookup_and_score_write_share_the_upsert_session(self, wiring):
        request_sessions, read_sessions, calls = wiring

        response = TestClient(app).get("/api/dashboard", headers={"Authorization": "Bearer token"})

        assert response.status_code == 200
        assert response.json()["workReadinessScore"] == 30

        assert len(request_sessions) == 1
        request_session = request_sessions[0]
        assert calls["upsert"] is request_session
        assert calls["get_by_id"] is request_session
        assert calls["update_score"] is request_session

    def test_concurrent_reads_get_separate_read_only_sessions(self, wiring):
        request_sessions, read_sessions, calls = wiring

        assert TestClient(app).get("/api/dashboard", headers={"Authorization": "Bearer token"}).status_code == 200

        used = [calls[name] for name in self.READS]
        assert len({id(session) for session in used}) == len(self.READS)
        assert all(any(session is read for read in read_sessions) for session in used)
        assert not any(session is request_sessions[0] for session in used)
