"""API v1 Endpoints"""
from .activity import router as activity_router
from .auth import router as auth_router
from .credentials import router as credentials_router
from .dashboard import router as dashboard_router
from .job_applications import router as job_applications_router
from .jobs import router as jobs_router
from .otp import router as otp_router
from .profile import router as profile_router

__all__ = [
    "activity_router",
    "auth_router",
    "credentials_router",
    "dashboard_router",
    "job_applications_router",
    "jobs_router",
    "otp_router",
    "profile_router",
]
