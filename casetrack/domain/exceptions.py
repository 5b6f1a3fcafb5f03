"""Domain exceptions for the casetrack application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class CaseTrackException(Exception):
    """Base exception for all casetrack errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the API error handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(CaseTrackException):
    """Raised when input validation fails (e.g. missing required field)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(CaseTrackException):
    """Raised when authentication fails (e.g. invalid credentials or token)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(CaseTrackException):
    """Raised when the user lacks the permission level for the operation."""

    def __init__(
        self,
        resource: str | None = None,
        action: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with optional resource, action, and message.

        Args:
            resource: Optional resource type (e.g. 'case', 'user').
            action: Optional action that was attempted (e.g. 'delete').
            message: Human-readable message; default used when resource/action omitted.
        """
        if resource and action:
            message = f"Permission denied: {action} on {resource}"
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(CaseTrackException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str | int) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'case', 'tribunal').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class UserNotFoundException(CaseTrackException):
    """Raised when a hand-off targets a user name that is not registered."""

    def __init__(self, user_name: str) -> None:
        super().__init__(
            f"User '{user_name}' not found for tramitation",
            "USER_NOT_FOUND",
            {"user_name": user_name},
        )


class DuplicateProcessNumberException(CaseTrackException):
    """Raised when a process number is already used by another case."""

    def __init__(self, process_number: str) -> None:
        """Initialize with the colliding process number.

        Args:
            process_number: The trimmed process number that already exists.
        """
        super().__init__(
            f"Process number '{process_number}' is already registered",
            "DUPLICATE_PROCESS_NUMBER",
            {"process_number": process_number},
        )


class DuplicateEmailException(CaseTrackException):
    """Raised when creating or updating a user to an email already registered."""

    def __init__(self, email: str) -> None:
        super().__init__(
            f"Email '{email}' is already registered",
            "DUPLICATE_EMAIL",
            {"email": email},
        )


class DuplicateNameException(CaseTrackException):
    """Raised when a user, tribunal, phase or status name already exists."""

    def __init__(self, kind: str, name: str) -> None:
        """Initialize with lookup kind and the duplicate name.

        Args:
            kind: 'user' or a lookup catalog ('tribunal', 'phase', 'status').
            name: The name that already exists (compared case-insensitively).
        """
        super().__init__(
            f"{kind} '{name}' already exists",
            "DUPLICATE_NAME",
            {"kind": kind, "name": name},
        )


class AttachmentTooLargeException(CaseTrackException):
    """Raised when an attachment exceeds the configured size limit."""

    def __init__(self, file_name: str, size: int, max_bytes: int) -> None:
        super().__init__(
            f"File '{file_name}' is too large; maximum allowed is "
            f"{max_bytes // (1024 * 1024)}MB",
            "ATTACHMENT_TOO_LARGE",
            {"file_name": file_name, "size": size, "max_bytes": max_bytes},
        )


class AttachmentReadException(CaseTrackException):
    """Raised when an uploaded attachment could not be read or encoded."""

    def __init__(self, file_name: str, reason: str) -> None:
        super().__init__(
            f"Could not read attachment '{file_name}'",
            "ATTACHMENT_READ_ERROR",
            {"file_name": file_name, "reason": reason},
        )


class InvalidSnapshotException(CaseTrackException):
    """Raised when a submitted document does not describe a valid snapshot."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            "Invalid snapshot document",
            "INVALID_SNAPSHOT",
            {"reason": reason},
        )
