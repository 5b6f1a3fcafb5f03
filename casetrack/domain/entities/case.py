"""Case domain entity.

Represents one legal proceeding, independent of persistence. The
tramitation log and attachment list are append-only: entries are frozen
and only the append methods below ever grow the lists.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from datetime import date
from typing import Any

from casetrack.domain.deadlines import classify_deadline
from casetrack.domain.enums import DeadlineStatus, Priority
from casetrack.domain.exceptions import ValidationException


@dataclass(frozen=True)
class TramitationEntry:
    """One hand-off of a case from one user to another."""

    from_user: str
    to_user: str
    timestamp: str
    deadline: str = ""


@dataclass(frozen=True)
class Attachment:
    """A file attached to a case. content is an opaque data URL."""

    id: str
    file_name: str
    file_type: str
    file_size: int
    content: str
    uploaded_by: str
    timestamp: str


@dataclass
class CaseDetails:
    """Editable attributes of a case (everything except identity, log and attachments).

    Used as the draft for creation, import and updates.
    """

    process_number: str = ""
    tribunal: str = ""
    author: str = ""
    defendant: str = ""
    court: str = ""
    venue: str = ""
    subject_matter: str = ""
    action_nature: str = ""
    claim_value: str = ""
    secret_of_justice: bool = False
    appointment_date: str = ""
    start_date: str = ""
    assigned_deadline: str = ""
    scheduled_date: str = ""
    final_deadline: str = ""
    final_deadline_calendar: str = ""
    assigned_date: str = ""
    start_hour: str = "09:00"
    finish_hour: str = "18:00"
    business_days: int = 0
    priority: Priority = Priority.LOW
    phase: str = ""
    status: str = ""
    assignee_name: str = ""
    assignee_email: str = ""
    co_responsible_name: str = ""
    # Keys found in a loaded snapshot that this model does not know; written back unchanged.
    extra: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def process_key(self) -> str:
        """Process number as compared for uniqueness (trimmed, exact)."""
        return self.process_number.strip()

    def details(self) -> CaseDetails:
        """Return a standalone copy of the editable attributes."""
        return CaseDetails(
            **{f.name: getattr(self, f.name) for f in fields(CaseDetails)}
        )


@dataclass
class CaseEntity(CaseDetails):
    """Domain entity for a case with identity, owner and append-only history."""

    id: int = 0
    display_id: str = ""
    owner_name: str = ""
    tramitation_log: list[TramitationEntry] = field(default_factory=list)
    attachments: list[Attachment] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate case identity. Raises ValidationException if invalid."""
        if self.id <= 0:
            raise ValidationException("Case ID must be a positive integer", field="id")
        if not self.display_id:
            raise ValidationException("Case display ID is required", field="display_id")

    def with_details(self, details: CaseDetails) -> CaseEntity:
        """Return a copy whose editable attributes come from details.

        Identity, owner, log and attachments are kept from this entity so an
        update can never rewrite history.
        """
        values = {f.name: getattr(details, f.name) for f in fields(CaseDetails)}
        return replace(
            self,
            **values,
            tramitation_log=list(self.tramitation_log),
            attachments=list(self.attachments),
        )

    def record_tramitation(self, entry: TramitationEntry) -> None:
        """Append a hand-off to the log."""
        self.tramitation_log.append(entry)

    def add_attachment(self, attachment: Attachment) -> None:
        """Append an attachment."""
        self.attachments.append(attachment)

    @property
    def last_recipient(self) -> str | None:
        """to_user of the most recent tramitation, if any."""
        return self.tramitation_log[-1].to_user if self.tramitation_log else None

    def is_archived(self, archived_status_name: str) -> bool:
        """Archiving is a status value, not a separate lifecycle state."""
        return self.status == archived_status_name

    def is_unassigned(self, owner_name: str) -> bool:
        """True when nobody but the firm itself holds the case."""
        return not self.assignee_name or self.assignee_name == owner_name

    def involves(self, user_name: str, user_email: str) -> bool:
        """True if the user holds the case now or appears anywhere in its log."""
        if self.assignee_email and self.assignee_email == user_email:
            return True
        return any(
            entry.from_user == user_name or entry.to_user == user_name
            for entry in self.tramitation_log
        )

    def deadline_status(
        self, today: date | None = None, due_soon_days: int = 7
    ) -> DeadlineStatus:
        """Urgency of the final deadline, recomputed on every call."""
        return classify_deadline(
            self.final_deadline, self.status, today=today, due_soon_days=due_soon_days
        )
