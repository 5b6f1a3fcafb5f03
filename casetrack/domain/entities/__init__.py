"""Domain entities (business objects independent of persistence)."""

from casetrack.domain.entities.case import (
    Attachment,
    CaseDetails,
    CaseEntity,
    TramitationEntry,
)
from casetrack.domain.entities.lookup import LookupEntity
from casetrack.domain.entities.user import UserEntity

__all__ = [
    "Attachment",
    "CaseDetails",
    "CaseEntity",
    "LookupEntity",
    "TramitationEntry",
    "UserEntity",
]
