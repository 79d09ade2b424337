"""Domain Entities - Core business objects"""

from .user import User
from .user_profile import UserProfile
from .credential import Credential
from .job import Job
from .job_application import JobApplication, JobApplicationWithJob
from .activity import UserActivity
from .otp_verification import OtpVerification
from .dashboard import Dashboard
__all__ = [
    "User",
    "UserProfile",
    "Credential",
    "Job",
    "JobApplication",
    "JobApplicationWithJob",
    "UserActivity",
    "OtpVerification",
    "Dashboard",
]
