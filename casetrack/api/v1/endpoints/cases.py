"""Cases API: CRUD, bulk operations, tramitation, attachments, board and calendar.

Standard users see and act on the active cases assigned to them; admins
see everything and alone may delete, bulk-edit or read archived cases.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from casetrack.api.v1.dependencies import (
    CurrentUser,
    SettingsDep,
    WorkspaceDep,
    require_admin_for,
)
from casetrack.application.services import case_queries
from casetrack.application.services.attachments import (
    check_attachment_size,
    encode_attachment,
)
from casetrack.application.services.authorization import (
    ensure_case_access,
    require_admin,
)
from casetrack.application.services.workspace import Workspace
from casetrack.core.config import Settings
from casetrack.domain.entities import Attachment, CaseEntity, UserEntity
from casetrack.domain.enums import BoardGrouping, CaseScope, Priority
from casetrack.domain.exceptions import AttachmentReadException
from casetrack.schemas.case import (
    BoardColumnResponse,
    BoardMoveRequest,
    BulkCaseUpdateRequest,
    BulkDeleteRequest,
    BulkDeleteResponse,
    CalendarDayResponse,
    CaseCreateRequest,
    CaseResponse,
    CaseUpdateRequest,
)
from casetrack.shared.utils.datetime import local_today


router = APIRouter()


def _response(case: CaseEntity, settings: Settings) -> CaseResponse:
    return CaseResponse.from_entity(case, due_soon_days=settings.due_soon_days)


def _visible_active_cases(workspace: Workspace, user: UserEntity) -> list[CaseEntity]:
    active = workspace.active_cases()
    return active if user.is_admin else case_queries.assigned_to(active, user)


async def _read_attachment(
    upload: UploadFile, uploaded_by: str, max_bytes: int
) -> Attachment:
    """Check the declared size, read at most max_bytes + 1, then encode."""
    file_name = upload.filename or "attachment"
    check_attachment_size(file_name, upload.size, max_bytes)
    try:
        data = await upload.read(max_bytes + 1)
    except OSError as e:
        raise AttachmentReadException(file_name, str(e)) from e
    finally:
        await upload.close()
    return encode_attachment(file_name, upload.content_type, data, uploaded_by, max_bytes)


@router.get("", response_model=list[CaseResponse])
async def list_cases(
    workspace: WorkspaceDep,
    current_user: CurrentUser,
    settings: SettingsDep,
    scope: CaseScope = CaseScope.ACTIVE,
    mine: bool = False,
    search: str | None = Query(default=None, max_length=200),
    priority: Priority | None = None,
    assignee: str | None = None,
):
    """List cases of a scope, optionally only mine and filtered."""
    if scope != CaseScope.ACTIVE:
        require_admin(current_user, "case", f"list {scope.value}")
    cases = case_queries.by_scope(
        workspace.cases.list_cases(), scope, settings.archived_status_name
    )
    if mine or not current_user.is_admin:
        cases = case_queries.assigned_to(cases, current_user)
    cases = case_queries.filter_cases(cases, search, priority, assignee)
    return [_response(c, settings) for c in cases]


@router.post("", response_model=CaseResponse, status_code=status.HTTP_201_CREATED)
async def create_case(
    body: CaseCreateRequest,
    workspace: WorkspaceDep,
    current_user: CurrentUser,
    settings: SettingsDep,
):
    """Create a case; its first tramitation goes from the current user to the assignee."""
    case = await workspace.add_case(body.to_details(), current_user)
    return _response(case, settings)


@router.put("", response_model=list[CaseResponse])
async def update_cases(
    body: BulkCaseUpdateRequest,
    workspace: WorkspaceDep,
    current_user: Annotated[UserEntity, Depends(require_admin_for("case", "bulk update"))],
    settings: SettingsDep,
):
    """Update several cases at once (admin). Unknown ids are skipped."""
    stored_extra = {c.id: c.extra for c in workspace.cases.list_cases()}
    updates = {
        item.id: item.to_details(extra=stored_extra.get(item.id)) for item in body.cases
    }
    cases = await workspace.update_cases(updates, current_user)
    return [_response(c, settings) for c in cases]


@router.post("/bulk-delete", response_model=BulkDeleteResponse)
async def delete_cases(
    body: BulkDeleteRequest,
    workspace: WorkspaceDep,
    _admin: Annotated[UserEntity, Depends(require_admin_for("case", "delete"))],
):
    """Delete every listed case that exists (admin)."""
    deleted = await workspace.delete_cases(body.ids)
    return BulkDeleteResponse(deleted=deleted)


@router.get("/board", response_model=list[BoardColumnResponse])
async def board(
    workspace: WorkspaceDep,
    current_user: CurrentUser,
    settings: SettingsDep,
    group_by: BoardGrouping = BoardGrouping.STATUS,
):
    """Active cases grouped into kanban columns."""
    catalog_names: list[str] = []
    if group_by == BoardGrouping.STATUS:
        catalog_names = [
            n for n in workspace.catalog("status").names() if n != settings.archived_status_name
        ]
    elif group_by == BoardGrouping.PHASE:
        catalog_names = workspace.catalog("phase").names()
    elif group_by == BoardGrouping.TRIBUNAL:
        catalog_names = workspace.catalog("tribunal").names()
    columns = case_queries.board_columns(
        _visible_active_cases(workspace, current_user),
        group_by,
        catalog_names,
        settings.owner_name,
    )
    return [
        BoardColumnResponse(
            key=col.key,
            title=col.title,
            cases=[_response(c, settings) for c in col.cases],
        )
        for col in columns
    ]


@router.get("/calendar", response_model=list[CalendarDayResponse])
async def calendar(
    workspace: WorkspaceDep,
    current_user: CurrentUser,
    settings: SettingsDep,
    year: int | None = Query(default=None, ge=1900, le=9999),
    month: int | None = Query(default=None, ge=1, le=12),
):
    """Active cases grouped by final deadline for one month (default: current month)."""
    today = local_today()
    days = case_queries.calendar_days(
        _visible_active_cases(workspace, current_user),
        year or today.year,
        month or today.month,
    )
    return [
        CalendarDayResponse(day=d.day, cases=[_response(c, settings) for c in d.cases])
        for d in days
    ]


@router.get("/{case_id}", response_model=CaseResponse)
async def get_case(
    case_id: int,
    workspace: WorkspaceDep,
    current_user: CurrentUser,
    settings: SettingsDep,
):
    case = workspace.cases.get_case(case_id)
    ensure_case_access(current_user, case, "read")
    return _response(case, settings)


@router.put("/{case_id}", response_model=CaseResponse)
async def update_case(
    case_id: int,
    body: CaseUpdateRequest,
    workspace: WorkspaceDep,
    current_user: CurrentUser,
    settings: SettingsDep,
):
    """Replace a case's editable fields. Changing the assignee logs one tramitation."""
    stored = workspace.cases.get_case(case_id)
    ensure_case_access(current_user, stored, "update")
    case = await workspace.update_case(
        case_id, body.to_details(extra=stored.extra), current_user
    )
    return _response(case, settings)


@router.delete("/{case_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_case(
    case_id: int,
    workspace: WorkspaceDep,
    _admin: Annotated[UserEntity, Depends(require_admin_for("case", "delete"))],
):
    await workspace.delete_case(case_id)


@router.post("/{case_id}/move", response_model=CaseResponse)
async def move_case(
    case_id: int,
    body: BoardMoveRequest,
    workspace: WorkspaceDep,
    current_user: CurrentUser,
    settings: SettingsDep,
):
    """Drop a case into a board column."""
    ensure_case_access(current_user, workspace.cases.get_case(case_id), "move")
    case = await workspace.move_case(case_id, body.group_by, body.column, current_user)
    return _response(case, settings)


@router.post("/{case_id}/tramitations", response_model=CaseResponse)
async def tramitate_case(
    case_id: int,
    workspace: WorkspaceDep,
    current_user: CurrentUser,
    settings: SettingsDep,
    to_user: Annotated[str, Form(min_length=1)],
    deadline: Annotated[str, Form()] = "",
    file: Annotated[UploadFile | None, File()] = None,
):
    """Hand a case to another user, optionally with a document.

    The file is read and encoded before the case is touched; a file that is
    too large or unreadable leaves the case unchanged.
    """
    ensure_case_access(current_user, workspace.cases.get_case(case_id), "tramitate")
    attachment = None
    if file is not None and file.filename:
        attachment = await _read_attachment(
            file, current_user.name, settings.max_attachment_bytes
        )
    case = await workspace.tramitate(case_id, to_user, deadline, current_user, attachment)
    return _response(case, settings)


@router.post(
    "/{case_id}/attachments",
    response_model=CaseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_attachment(
    case_id: int,
    workspace: WorkspaceDep,
    current_user: CurrentUser,
    settings: SettingsDep,
    file: Annotated[UploadFile, File()],
):
    """Attach a document to a case without handing it off."""
    ensure_case_access(current_user, workspace.cases.get_case(case_id), "attach")
    attachment = await _read_attachment(
        file, current_user.name, settings.max_attachment_bytes
    )
    case = await workspace.add_attachment(case_id, attachment)
    return _response(case, settings)
