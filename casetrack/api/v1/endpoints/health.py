"""Health check endpoint, used for liveness probes."""

from fastapi import APIRouter

from casetrack.api.v1.dependencies import SettingsDep, WorkspaceDep
from casetrack.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(workspace: WorkspaceDep, settings: SettingsDep) -> HealthResponse:
    """Return ok with the version and the number of cases held."""
    return HealthResponse(version=settings.app_version, cases=len(workspace.cases))
