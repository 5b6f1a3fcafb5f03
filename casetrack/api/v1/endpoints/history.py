"""Tramitation history API."""

from typing import Literal

from fastapi import APIRouter, Query

from casetrack.api.v1.dependencies import CurrentUser, WorkspaceDep
from casetrack.application.services import case_queries
from casetrack.schemas.history import HistoryRowResponse

router = APIRouter()


@router.get("", response_model=list[HistoryRowResponse])
async def list_history(
    workspace: WorkspaceDep,
    current_user: CurrentUser,
    search: str | None = Query(default=None, max_length=200),
    sort: str = "timestamp",
    direction: Literal["asc", "desc"] = "desc",
):
    """Every tramitation entry as one row.

    Admins see all cases; other users see the cases they hold or have
    sent or received.
    """
    cases = workspace.cases.list_cases()
    if not current_user.is_admin:
        cases = case_queries.involving(cases, current_user)
    rows = case_queries.history(cases, search, sort, descending=direction == "desc")
    return [HistoryRowResponse.model_validate(r) for r in rows]
