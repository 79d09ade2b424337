"""
Dashboard Aggregator
Composes profile, credentials, activity and applications into one read model
"""
import asyncio
from typing import Optional

from loguru import logger

from workpass.core.config import settings
from workpass.core.exceptions import ResourceNotFoundException
from workpass.domain.entities import Dashboard
from workpass.application.repositories.interfaces import (
    IUserRepository,
    IUserProfileRepository,
    ICredentialRepository,
    IActivityRepository,
    IJobApplicationRepository,
)
from .work_readiness import calculate_work_readiness_score


class DashboardService:
    """
    Builds the worker dashboard.

    The five reads after the user lookup have no ordering between them and
    run concurrently, so each of those repositories must sit on its own
    session. The user repository must share the session the caller was
    upserted on, otherwise the lookup misses a new user's uncommitted row
    and the score write-back blocks on that row's lock.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        profile_repository: IUserProfileRepository,
        credential_repository: ICredentialRepository,
        expiring_credential_repository: ICredentialRepository,
        activity_repository: IActivityRepository,
        application_repository: IJobApplicationRepository,
        expiring_within_days: Optional[int] = None,
        recent_activity_limit: Optional[int] = None,
        persist_score: Optional[bool] = None
    ):
        self.user_repo = user_repository
        self.profile_repo = profile_repository
        self.credential_repo = credential_repository
        self.expiring_repo = expiring_credential_repository
        self.activity_repo = activity_repository
        self.application_repo = application_repository

        self.expiring_within_days = (
            expiring_within_days if expiring_within_days is not None
            else settings.DASHBOARD_EXPIRING_WITHIN_DAYS
        )
        self.recent_activity_limit = (
            recent_activity_limit if recent_activity_limit is not None
            else settings.DASHBOARD_RECENT_ACTIVITY_LIMIT
        )
        self.persist_score = (
            persist_score if persist_score is not None
            else settings.PERSIST_WORK_READINESS_SCORE
        )

    async def get_dashboard(self, user_id: str) -> Dashboard:
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise ResourceNotFoundException("User", user_id)

        profile, credentials, expiring, activity, applications = await asyncio.gather(
            self.profile_repo.get_by_user_id(user_id),
            self.credential_repo.list_active(user_id),
            self.expiring_repo.list_expiring_within(user_id, self.expiring_within_days),
            self.activity_repo.list_recent(user_id, self.recent_activity_limit),
            self.application_repo.list_with_jobs(user_id),
        )

        score = calculate_work_readiness_score(credentials)

        if self.persist_score and score != user.work_readiness_score:
            await self.user_repo.update_work_readiness_score(user_id, score)
            logger.debug(f"Stored work readiness score {score} for user {user_id}")

        return Dashboard(
            user=user,
            profile=profile,
            credentials=credentials,
            expiring_credentials=expiring,
            recent_activity=activity,
            job_applications=applications,
            work_readiness_score=score,
        )
