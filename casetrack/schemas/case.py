"""Case API schemas."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from casetrack.domain.deadlines import DUE_SOON_DAYS, describe_deadline
from casetrack.domain.entities import CaseDetails, CaseEntity
from casetrack.domain.enums import BoardGrouping, DeadlineStatus, Priority


class CaseFields(BaseModel):
    """Editable case attributes, shared by create and update bodies."""

    process_number: str = Field(..., min_length=1, max_length=100)
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
    business_days: int = Field(default=0, ge=0)
    priority: Priority = Priority.LOW
    phase: str = ""
    status: str = ""
    assignee_name: str = ""
    assignee_email: str = ""
    co_responsible_name: str = ""

    def to_details(self, extra: dict | None = None) -> CaseDetails:
        """Build domain details; extra carries unknown snapshot keys of the stored case."""
        values = self.model_dump(include=set(CaseFields.model_fields))
        return CaseDetails(**values, extra=dict(extra or {}))


class CaseCreateRequest(CaseFields):
    """Request body for POST /cases."""


class CaseUpdateRequest(CaseFields):
    """Request body for PUT /cases/{id} (full replacement of editable fields)."""


class BulkCaseUpdateItem(CaseFields):
    id: int = Field(..., gt=0)


class BulkCaseUpdateRequest(BaseModel):
    """Request body for PUT /cases."""

    cases: list[BulkCaseUpdateItem] = Field(..., min_length=1)


class BulkDeleteRequest(BaseModel):
    ids: list[int] = Field(..., min_length=1)


class BulkDeleteResponse(BaseModel):
    deleted: int


class BoardMoveRequest(BaseModel):
    """Drop a case into a board column."""

    group_by: BoardGrouping
    column: str = Field(..., min_length=1)


class TramitationEntryResponse(BaseModel):
    from_user: str
    to_user: str
    timestamp: str
    deadline: str


class AttachmentResponse(BaseModel):
    id: str
    file_name: str
    file_type: str
    file_size: int
    content: str
    uploaded_by: str
    timestamp: str


class CaseResponse(CaseFields):
    """Case with identity, history and the deadline status computed at response time."""

    process_number: str = ""
    id: int
    display_id: str
    owner_name: str
    tramitation_log: list[TramitationEntryResponse]
    attachments: list[AttachmentResponse]
    last_recipient: str | None = None
    deadline_status: DeadlineStatus
    deadline_label: str | None = None

    @classmethod
    def from_entity(
        cls,
        case: CaseEntity,
        today: date | None = None,
        due_soon_days: int = DUE_SOON_DAYS,
    ) -> CaseResponse:
        status = case.deadline_status(today, due_soon_days)
        label = None
        if status not in (DeadlineStatus.COMPLETED, DeadlineStatus.UNSET):
            label = describe_deadline(case.final_deadline, today)
        return cls(
            **{name: getattr(case, name) for name in CaseFields.model_fields},
            id=case.id,
            display_id=case.display_id,
            owner_name=case.owner_name,
            tramitation_log=[
                TramitationEntryResponse(
                    from_user=t.from_user,
                    to_user=t.to_user,
                    timestamp=t.timestamp,
                    deadline=t.deadline,
                )
                for t in case.tramitation_log
            ],
            attachments=[
                AttachmentResponse(
                    id=a.id,
                    file_name=a.file_name,
                    file_type=a.file_type,
                    file_size=a.file_size,
                    content=a.content,
                    uploaded_by=a.uploaded_by,
                    timestamp=a.timestamp,
                )
                for a in case.attachments
            ],
            last_recipient=case.last_recipient,
            deadline_status=status,
            deadline_label=label,
        )


class BoardColumnResponse(BaseModel):
    key: str
    title: str
    cases: list[CaseResponse]


class CalendarDayResponse(BaseModel):
    day: date
    cases: list[CaseResponse]
