"""Dashboard API: counts and deadline buckets over active cases."""

from typing import Annotated

from fastapi import APIRouter, Depends

from casetrack.api.v1.dependencies import (
    CurrentUser,
    SettingsDep,
    WorkspaceDep,
    require_admin_for,
)
from casetrack.application.services import case_queries, dashboard_service
from casetrack.domain.entities import UserEntity
from casetrack.schemas.dashboard import (
    CaseSummaryResponse,
    GlobalDashboardResponse,
    PersonalDashboardResponse,
)

router = APIRouter()


@router.get("/summary", response_model=CaseSummaryResponse)
async def summary(workspace: WorkspaceDep, current_user: CurrentUser):
    """Total and per-priority counts of the active cases the user can see."""
    cases = workspace.active_cases()
    if not current_user.is_admin:
        cases = case_queries.assigned_to(cases, current_user)
    return CaseSummaryResponse.model_validate(dashboard_service.summarize(cases))


@router.get("/global", response_model=GlobalDashboardResponse)
async def global_dashboard(
    workspace: WorkspaceDep,
    settings: SettingsDep,
    _admin: Annotated[UserEntity, Depends(require_admin_for("dashboard", "read global"))],
):
    data = dashboard_service.global_dashboard(
        workspace.active_cases(), due_soon_days=settings.due_soon_days
    )
    return GlobalDashboardResponse.model_validate(data)


@router.get("/me", response_model=PersonalDashboardResponse)
async def personal_dashboard(
    workspace: WorkspaceDep, current_user: CurrentUser, settings: SettingsDep
):
    """KPIs over the active cases assigned to the current user."""
    cases = case_queries.assigned_to(workspace.active_cases(), current_user)
    data = dashboard_service.personal_dashboard(
        cases, current_user, due_soon_days=settings.due_soon_days
    )
    return PersonalDashboardResponse.model_validate(data)
