"""Snapshot document models and entity mappers.

Document keys are those of the database.json written by the earlier
browser client (Portuguese camelCase), so existing files load unchanged.
Keys the models do not know are kept and written back on save.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Any

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
)

from casetrack.application.dtos.snapshot import WorkspaceState
from casetrack.domain.entities import (
    Attachment,
    CaseEntity,
    LookupEntity,
    TramitationEntry,
    UserEntity,
)
from casetrack.domain.enums import Permission, Priority
from casetrack.domain.exceptions import InvalidSnapshotException, ValidationException
from casetrack.shared.utils.generators import display_id_for
from casetrack.shared.utils.text import fold

PRIORITY_LABELS = {
    Priority.HIGH: "Alta",
    Priority.MEDIUM: "Média",
    Priority.LOW: "Baixa",
}
PERMISSION_LABELS = {Permission.ADMIN: "adm", Permission.STANDARD: "user"}
SECRET_YES = "Sim"
SECRET_NO = "Não"


def _text(value: Any) -> Any:
    """null -> '' and numbers -> str, so legacy cells never fail validation."""
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _whole_number(value: Any) -> Any:
    if value is None or value == "":
        return 0
    if isinstance(value, str):
        try:
            return int(float(value.replace(",", ".")))
        except ValueError:
            return 0
    return value


Text = Annotated[str, BeforeValidator(_text)]
WholeNumber = Annotated[int, BeforeValidator(_whole_number)]


class _Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def extras(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class TramitationDocument(_Document):
    from_user: Text = Field("", alias="fromUser")
    to_user: Text = Field("", alias="toUser")
    timestamp: Text = ""
    deadline: Text = ""


class AttachmentDocument(_Document):
    id: Text
    file_name: Text = Field("", alias="fileName")
    file_type: Text = Field("", alias="fileType")
    file_size: WholeNumber = Field(0, alias="fileSize")
    content: Text = ""
    uploaded_by: Text = Field("", alias="uploadedBy")
    timestamp: Text = ""


class CaseDocument(_Document):
    id: int
    display_id: Text = Field("", alias="id2")
    tribunal: Text = ""
    process_number: Text = Field("", alias="processoNumero")
    author: Text = Field("", alias="autor")
    defendant: Text = Field("", alias="reu")
    court: Text = Field("", alias="trib")
    venue: Text = Field("", alias="varaComarca")
    subject_matter: Text = Field("", alias="materia")
    owner_name: Text = Field("", alias="ownerName")
    assignee_name: Text = Field("", alias="name")
    assignee_email: Text = Field("", alias="email")
    co_responsible_name: Text = Field("", alias="coResponsibleName")
    tramitation_log: list[TramitationDocument] = Field(
        default_factory=list, alias="tramitationLog"
    )
    attachments: list[AttachmentDocument] = Field(default_factory=list)
    appointment_date: Text = Field("", alias="dataNomeacao")
    start_date: Text = Field("", alias="dataInicial")
    assigned_deadline: Text = Field("", alias="prazoDeterminado")
    scheduled_date: Text = Field("", alias="dataDesignada")
    final_deadline: Text = Field("", alias="dataFinal")
    start_hour: Text = Field("09:00", alias="startHour")
    finish_hour: Text = Field("18:00", alias="finishHour")
    final_deadline_calendar: Text = Field("", alias="dataFinalCorridos")
    business_days: WholeNumber = Field(0, alias="diasUteis")
    priority: Text = Field(PRIORITY_LABELS[Priority.LOW], alias="prioridade")
    assigned_date: Text = Field("", alias="dataAtribuida")
    phase: Text = Field("", alias="fases")
    status: Text = ""
    secret_of_justice: Text | bool = Field(SECRET_NO, alias="segredoDeJustica")
    action_nature: Text = Field("", alias="naturezaAcao")
    claim_value: Text = Field("", alias="valorDaAcao")


class UserDocument(_Document):
    id: int
    name: Text
    email: Text
    permission: Text = PERMISSION_LABELS[Permission.STANDARD]
    password_hash: str | None = Field(None, alias="passwordHash")
    # Plaintext password from older snapshots; hashed on load, never written back.
    password: str | None = None


class LookupDocument(_Document):
    id: int
    name: Text


class SnapshotDocument(_Document):
    users: list[UserDocument] = Field(default_factory=list)
    cases: list[CaseDocument] = Field(default_factory=list)
    tribunals: list[LookupDocument] = Field(default_factory=list)
    phases: list[LookupDocument] = Field(
        default_factory=list, validation_alias=AliasChoices("phases", "fases")
    )
    statuses: list[LookupDocument] = Field(default_factory=list)


def _is_secret(value: str | bool) -> bool:
    if isinstance(value, bool):
        return value
    return fold(value) in ("sim", "yes", "true", "s", "1")


def case_from_document(doc: CaseDocument) -> CaseEntity:
    return CaseEntity(
        id=doc.id,
        display_id=doc.display_id or display_id_for(doc.id),
        owner_name=doc.owner_name,
        tribunal=doc.tribunal,
        process_number=doc.process_number,
        author=doc.author,
        defendant=doc.defendant,
        court=doc.court,
        venue=doc.venue,
        subject_matter=doc.subject_matter,
        action_nature=doc.action_nature,
        claim_value=doc.claim_value,
        secret_of_justice=_is_secret(doc.secret_of_justice),
        appointment_date=doc.appointment_date,
        start_date=doc.start_date,
        assigned_deadline=doc.assigned_deadline,
        scheduled_date=doc.scheduled_date,
        final_deadline=doc.final_deadline,
        final_deadline_calendar=doc.final_deadline_calendar,
        assigned_date=doc.assigned_date,
        start_hour=doc.start_hour,
        finish_hour=doc.finish_hour,
        business_days=doc.business_days,
        priority=Priority.parse(doc.priority),
        phase=doc.phase,
        status=doc.status,
        assignee_name=doc.assignee_name,
        assignee_email=doc.assignee_email,
        co_responsible_name=doc.co_responsible_name,
        tramitation_log=[
            TramitationEntry(
                from_user=t.from_user,
                to_user=t.to_user,
                timestamp=t.timestamp,
                deadline=t.deadline,
            )
            for t in doc.tramitation_log
        ],
        attachments=[
            Attachment(
                id=a.id,
                file_name=a.file_name,
                file_type=a.file_type,
                file_size=a.file_size,
                content=a.content,
                uploaded_by=a.uploaded_by,
                timestamp=a.timestamp,
            )
            for a in doc.attachments
        ],
        extra=doc.extras(),
    )


def case_to_document(case: CaseEntity) -> dict[str, Any]:
    doc = CaseDocument(
        id=case.id,
        display_id=case.display_id,
        tribunal=case.tribunal,
        process_number=case.process_number,
        author=case.author,
        defendant=case.defendant,
        court=case.court,
        venue=case.venue,
        subject_matter=case.subject_matter,
        owner_name=case.owner_name,
        assignee_name=case.assignee_name,
        assignee_email=case.assignee_email,
        co_responsible_name=case.co_responsible_name,
        tramitation_log=[
            TramitationDocument(
                from_user=t.from_user,
                to_user=t.to_user,
                timestamp=t.timestamp,
                deadline=t.deadline,
            )
            for t in case.tramitation_log
        ],
        attachments=[
            AttachmentDocument(
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
        appointment_date=case.appointment_date,
        start_date=case.start_date,
        assigned_deadline=case.assigned_deadline,
        scheduled_date=case.scheduled_date,
        final_deadline=case.final_deadline,
        start_hour=case.start_hour,
        finish_hour=case.finish_hour,
        final_deadline_calendar=case.final_deadline_calendar,
        business_days=case.business_days,
        priority=PRIORITY_LABELS[case.priority],
        assigned_date=case.assigned_date,
        phase=case.phase,
        status=case.status,
        secret_of_justice=SECRET_YES if case.secret_of_justice else SECRET_NO,
        action_nature=case.action_nature,
        claim_value=case.claim_value,
        **case.extra,
    )
    return doc.model_dump(by_alias=True)


def lookup_to_document(item: LookupEntity) -> dict[str, Any]:
    return {"id": item.id, "name": item.name}


class SnapshotCodec:
    """Converts snapshot documents to workspace state and back.

    Args:
        password_hasher: Used to hash legacy plaintext passwords on decode.
    """

    def __init__(self, password_hasher: Callable[[str], str]) -> None:
        self._hash = password_hasher

    def _user_from_document(self, doc: UserDocument) -> UserEntity:
        password_hash = doc.password_hash
        if not password_hash and doc.password:
            password_hash = self._hash(doc.password)
        return UserEntity(
            id=doc.id,
            name=doc.name,
            email=doc.email,
            permission=Permission.parse(doc.permission),
            password_hash=password_hash,
            extra=doc.extras(),
        )

    @staticmethod
    def _user_to_document(user: UserEntity) -> dict[str, Any]:
        doc = UserDocument(
            id=user.id,
            name=user.name,
            email=user.email,
            permission=PERMISSION_LABELS[user.permission],
            password_hash=user.password_hash,
            **user.extra,
        )
        return doc.model_dump(by_alias=True, exclude={"password"}, exclude_none=True)

    def decode(self, document: dict[str, Any], check_unique: bool = True) -> WorkspaceState:
        """Build workspace state from a document.

        Args:
            document: Snapshot document.
            check_unique: Reject repeated ids, process numbers, emails and names.

        Raises:
            InvalidSnapshotException: the document does not match the snapshot shape,
                holds an invalid record or (with check_unique) a repeated key.
        """
        try:
            snapshot = SnapshotDocument.model_validate(document)
            extra = snapshot.extras()
            extra.pop("fases", None)
            state = WorkspaceState(
                users=[self._user_from_document(u) for u in snapshot.users],
                cases=[case_from_document(c) for c in snapshot.cases],
                tribunals=[LookupEntity(id=t.id, name=t.name) for t in snapshot.tribunals],
                phases=[LookupEntity(id=p.id, name=p.name) for p in snapshot.phases],
                statuses=[LookupEntity(id=s.id, name=s.name) for s in snapshot.statuses],
                extra=extra,
            )
        except ValidationError as e:
            raise InvalidSnapshotException(f"{e.error_count()} invalid field(s)") from e
        except ValidationException as e:
            raise InvalidSnapshotException(e.message) from e
        if check_unique:
            conflicts = state.conflicts()
            if conflicts:
                raise InvalidSnapshotException("; ".join(conflicts))
        return state

    def encode(self, state: WorkspaceState) -> dict[str, Any]:
        return {
            **state.extra,
            "users": [self._user_to_document(u) for u in state.users],
            "cases": [case_to_document(c) for c in state.cases],
            "tribunals": [lookup_to_document(t) for t in state.tribunals],
            "phases": [lookup_to_document(p) for p in state.phases],
            "statuses": [lookup_to_document(s) for s in state.statuses],
        }
