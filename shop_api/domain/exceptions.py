# shop_api/domain/exceptions.py

"""
Domain exceptions.

Every failure a service can raise is one of these classes. Each carries the
HTTP status it maps to, so the error normalizer never has to guess.
"""

from dataclasses import dataclass
from typing import Any, List, Optional


class DomainException(Exception):
    """Base class for all business-rule failures."""

    status_code: int = 400
    internal_code: str = "DOMAIN_ERROR"
    default_message: str = "Domain error."

    def __init__(
            self,
            message: Optional[str] = None,
            status_code: Optional[int] = None,
            details: Any = None,
    ):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class ValidationIssue:
    """One violated constraint: where it happened and what to tell the client."""

    field: str
    message: str


class ValidationFailure(DomainException):
    """
    Raised when an input does not conform to its schema.

    Issues keep the order in which the schema reported them; only the first
    one reaches the client.
    """

    status_code = 400
    internal_code = "VALIDATION_ERROR"
    default_message = "Invalid input."

    def __init__(self, issues: List[ValidationIssue]):
        self.issues = list(issues)
        first = self.issues[0].message if self.issues else None
        super().__init__(message=first, details=[issue.__dict__ for issue in self.issues])


class ResourceNotFoundException(DomainException):
    status_code = 404
    internal_code = "RESOURCE_NOT_FOUND"
    default_message = "Resource not found."

    def __init__(self, message: Optional[str] = None, resource_id: Any = None):
        super().__init__(message=message)
        self.resource_id = resource_id


class ResourceAlreadyExistsException(DomainException):
    status_code = 400
    internal_code = "RESOURCE_ALREADY_EXISTS"
    default_message = "Resource already exists."


class InvalidCredentialsException(DomainException):
    status_code = 400
    internal_code = "INVALID_CREDENTIALS"
    default_message = "Incorrect email or password."


class InvalidTokenException(DomainException):
    status_code = 401
    internal_code = "INVALID_TOKEN"
    default_message = "Invalid token"


class DatabaseOperationException(DomainException):
    """Wraps unexpected store failures. Never shown to the client as-is."""

    status_code = 500
    internal_code = "DATABASE_ERROR"
    default_message = "Database operation failed."

    def __init__(self, message: Optional[str] = None, original_error: Optional[Exception] = None):
        super().__init__(message=message)
        self.original_error = original_error


class CredentialHashingException(DomainException):
    status_code = 500
    internal_code = "CREDENTIAL_HASHING_ERROR"
    default_message = "Password hashing failed."

    def __init__(self, message: Optional[str] = None, original_error: Optional[Exception] = None):
        super().__init__(message=message)
        self.original_error = original_error
