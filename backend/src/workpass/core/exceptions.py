"""
WorkPass error types
Each error knows the HTTP status and body it is reported with
"""
from typing import Any, Dict, Optional


class DomainException(Exception):
    """Base exception for all WorkPass errors"""

    status_code = 400

    def to_response(self) -> Dict[str, Any]:
        return {"detail": str(self)}


class AuthenticationException(DomainException):
    """Missing, malformed or rejected bearer token"""

    status_code = 401


class ValidationException(DomainException):
    """Request data rejected; ``field`` names the offending input"""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")

    def to_response(self) -> Dict[str, Any]:
        return {"detail": self.message, "field": self.field}


class RepositoryException(DomainException):
    """Storage failure; reported to clients as a generic 500"""

    status_code = 500

    def to_response(self) -> Dict[str, Any]:
        return {"detail": "Internal server error"}


class ResourceNotFoundException(DomainException):
    """Requested resource not found (or not owned by the caller)"""

    status_code = 404

    def __init__(self, resource_type: str, identifier: str):
        self.resource_type = resource_type
        self.identifier = identifier
        super().__init__(f"{resource_type} not found: {identifier}")


class DuplicateResourceException(DomainException):
    """Uniqueness rule hit, e.g. a second application to the same job"""

    def __init__(self, resource_type: str, field: str, value: str, message: Optional[str] = None):
        self.resource_type = resource_type
        self.field = field
        self.value = value
        super().__init__(message or f"{resource_type} with {field}='{value}' already exists")
