"""ORM Models Package"""

from .user import UserModel
from .user_profile import UserProfileModel
from .credential import CredentialModel
from .job import JobModel
from .job_application import JobApplicationModel
from .user_activity import UserActivityModel
from .otp_verification import OtpVerificationModel

__all__ = [
    "UserModel",
    "UserProfileModel",
    "CredentialModel",
    "JobModel",
    "JobApplicationModel",
    "UserActivityModel",
    "OtpVerificationModel",
]
