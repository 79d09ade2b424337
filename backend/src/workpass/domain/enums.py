"""
Domain Enums
Business enumerations for the application
"""
from enum import Enum


class UserRole(str, Enum):
    """Site role of a construction worker"""
    TRADESPERSON = "tradesperson"
    SUPERVISOR = "supervisor"
    FOREMAN = "foreman"
    APPRENTICE = "apprentice"


class ExperienceLevel(str, Enum):
    ENTRY = "entry"
    MID = "mid"
    SENIOR = "senior"


class AvailabilityStatus(str, Enum):
    """Whether a worker can take on new jobs"""
    AVAILABLE = "available"
    WORKING = "working"
    UNAVAILABLE = "unavailable"


class CredentialCategory(str, Enum):
    SAFETY = "safety"
    TRADE = "trade"
    MEDICAL = "medical"
    LICENSE = "license"


class CredentialType(str, Enum):
    """Credential types the work-readiness score knows about.

    Credentials may carry other type tags as well; those are stored and
    listed but never scored.
    """
    WHITE_CARD = "white_card"
    FIRST_AID = "first_aid"
    TRADE_CERTIFICATE = "trade_certificate"
    LICENSE = "license"


class VerificationStatus(str, Enum):
    """Review state of an uploaded credential"""
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


class JobType(str, Enum):
    PERMANENT = "permanent"
    CONTRACT = "contract"
    CASUAL = "casual"


class ApplicationStatus(str, Enum):
    """Status of job application"""
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class OtpChannel(str, Enum):
    """Delivery channel of a one-time password"""
    EMAIL = "email"
    SMS = "sms"


class ActivityAction(str, Enum):
    """Action tags written to the activity timeline"""
    CREATE_PROFILE = "create_profile"
    UPDATE_PROFILE = "update_profile"
    UPLOAD_CREDENTIAL = "upload_credential"
    UPDATE_CREDENTIAL = "update_credential"
    DELETE_CREDENTIAL = "delete_credential"
    APPLY_JOB = "apply_job"
