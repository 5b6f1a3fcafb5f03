"""Domain layer: entities, enums, deadline rules and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from casetrack.domain.deadlines import classify_deadline, describe_deadline
from casetrack.domain.entities import (
    Attachment,
    CaseDetails,
    CaseEntity,
    LookupEntity,
    TramitationEntry,
    UserEntity,
)
from casetrack.domain.enums import (
    BoardGrouping,
    CaseScope,
    DeadlineStatus,
    Permission,
    Priority,
)
from casetrack.domain.exceptions import (
    AttachmentReadException,
    AttachmentTooLargeException,
    AuthenticationException,
    AuthorizationException,
    CaseTrackException,
    DuplicateEmailException,
    DuplicateNameException,
    DuplicateProcessNumberException,
    InvalidSnapshotException,
    ResourceNotFoundException,
    UserNotFoundException,
    ValidationException,
)

__all__ = [
    # Deadline rules
    "classify_deadline",
    "describe_deadline",
    # Entities
    "Attachment",
    "CaseDetails",
    "CaseEntity",
    "LookupEntity",
    "TramitationEntry",
    "UserEntity",
    # Enums
    "BoardGrouping",
    "CaseScope",
    "DeadlineStatus",
    "Permission",
    "Priority",
    # Exceptions
    "AttachmentReadException",
    "AttachmentTooLargeException",
    "AuthenticationException",
    "AuthorizationException",
    "CaseTrackException",
    "DuplicateEmailException",
    "DuplicateNameException",
    "DuplicateProcessNumberException",
    "InvalidSnapshotException",
    "ResourceNotFoundException",
    "UserNotFoundException",
    "ValidationException",
]
