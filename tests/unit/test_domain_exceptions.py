"""Tests for domain exceptions (error_code, message, details)."""

from casetrack.domain.exceptions import (
    AttachmentTooLargeException,
    AuthenticationException,
    AuthorizationException,
    CaseTrackException,
    DuplicateNameException,
    DuplicateProcessNumberException,
    InvalidSnapshotException,
    ResourceNotFoundException,
    UserNotFoundException,
    ValidationException,
)
from casetrack.infrastructure.exceptions import SnapshotReadError, SnapshotWriteError


def test_base_exception_default_error_code() -> None:
    """Base CaseTrackException uses class name as error_code when not provided."""
    exc = CaseTrackException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "CaseTrackException"
    assert exc.details == {}


def test_to_dict_shape() -> None:
    exc = CaseTrackException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {"error": "CUSTOM", "message": "Oops", "details": {"key": "value"}}


def test_validation_exception() -> None:
    exc = ValidationException("Invalid format", field="email")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "email"}
    assert ValidationException("Invalid").details == {}


def test_authentication_exception() -> None:
    exc = AuthenticationException()
    assert exc.message == "Authentication failed"
    assert exc.error_code == "AUTHENTICATION_ERROR"


def test_authorization_exception_with_resource_and_action() -> None:
    exc = AuthorizationException(resource="case", action="delete")
    assert exc.message == "Permission denied: delete on case"
    assert exc.error_code == "PERMISSION_DENIED"
    assert exc.details == {"resource": "case", "action": "delete"}


def test_not_found_exceptions() -> None:
    exc = ResourceNotFoundException("case", 7)
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "case", "resource_id": 7}
    assert UserNotFoundException("Nobody").details == {"user_name": "Nobody"}


def test_duplicate_exceptions() -> None:
    assert DuplicateProcessNumberException("0001").error_code == "DUPLICATE_PROCESS_NUMBER"
    exc = DuplicateNameException("status", "Arquivado")
    assert exc.error_code == "DUPLICATE_NAME"
    assert exc.details == {"kind": "status", "name": "Arquivado"}


def test_attachment_too_large_mentions_limit() -> None:
    exc = AttachmentTooLargeException("big.pdf", 3 * 1024 * 1024, 2 * 1024 * 1024)
    assert "2MB" in exc.message
    assert exc.details["size"] == 3 * 1024 * 1024


def test_snapshot_errors() -> None:
    assert InvalidSnapshotException("bad").details == {"reason": "bad"}
    assert SnapshotReadError("/tmp/db.json", "denied").error_code == "SNAPSHOT_READ_ERROR"
    assert SnapshotWriteError("/tmp/db.json", "disk full").error_code == "SNAPSHOT_WRITE_ERROR"
    assert isinstance(SnapshotWriteError("/x", "y"), CaseTrackException)
