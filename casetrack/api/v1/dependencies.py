"""Presentation-layer dependency injection.

The workspace is created once by the lifespan and kept on app.state;
routes receive it (and the authenticated user) through Depends().
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from casetrack.application.services.authorization import require_admin
from casetrack.application.services.workspace import Workspace
from casetrack.core.config import Settings, get_settings
from casetrack.domain.entities import UserEntity
from casetrack.domain.exceptions import ResourceNotFoundException
from casetrack.infrastructure.security.jwt import decode_access_token

_http_bearer = HTTPBearer(auto_error=False)


def get_workspace(request: Request) -> Workspace:
    """Workspace opened at startup; 503 if the app has not finished starting."""
    workspace = getattr(request.app.state, "workspace", None)
    if workspace is None:
        raise HTTPException(status_code=503, detail="Workspace not loaded")
    return workspace


async def get_current_user_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    workspace: Annotated[Workspace, Depends(get_workspace)],
) -> UserEntity | None:
    """Return current user from JWT if present; else None."""
    if not credentials:
        return None
    try:
        payload = decode_access_token(credentials.credentials)
        return workspace.directory.get(int(payload["sub"]))
    except (ValueError, KeyError, ResourceNotFoundException):
        return None


async def get_current_user(
    current_user: Annotated[UserEntity | None, Depends(get_current_user_optional)],
) -> UserEntity:
    """Return current user from JWT; raise 401 if missing or invalid."""
    if current_user is None:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return current_user


def require_admin_for(resource: str, action: str):
    """Dependency factory: require JWT auth and admin permission."""

    async def _require(
        current_user: Annotated[UserEntity, Depends(get_current_user)],
    ) -> UserEntity:
        require_admin(current_user, resource, action)
        return current_user

    return _require


WorkspaceDep = Annotated[Workspace, Depends(get_workspace)]
CurrentUser = Annotated[UserEntity, Depends(get_current_user)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
