"""Whole-document routes used by the browser client (mounted at /api).

The client reads the complete snapshot, edits it locally and posts it back.
Reading and replacing the document are admin-only. A posted document must
decode as a valid snapshot with unique keys; it is then stored and the
in-memory workspace is reloaded from it.
"""

import json
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from casetrack.api.v1.dependencies import SettingsDep, WorkspaceDep, require_admin_for
from casetrack.domain.entities import UserEntity
from casetrack.domain.exceptions import ValidationException
from casetrack.schemas.health import ServerStatusResponse

router = APIRouter(tags=["snapshot"])


@router.get("/db")
async def read_snapshot(
    workspace: WorkspaceDep,
    _admin: Annotated[UserEntity, Depends(require_admin_for("snapshot", "read"))],
) -> JSONResponse:
    """Return the stored snapshot as-is."""
    return JSONResponse(content=await workspace.stored_document())


@router.post("/save")
async def save_snapshot(
    request: Request,
    workspace: WorkspaceDep,
    _admin: Annotated[UserEntity, Depends(require_admin_for("snapshot", "replace"))],
) -> dict[str, Any]:
    """Replace the stored snapshot with the request body."""
    try:
        document = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValidationException("Body is not valid JSON", field="body") from e
    if not isinstance(document, dict):
        raise ValidationException("Body must be a JSON object", field="body")
    await workspace.replace_document(document)
    return {"success": True}


@router.get("/status", response_model=ServerStatusResponse)
async def server_status(settings: SettingsDep) -> ServerStatusResponse:
    return ServerStatusResponse(port=settings.port)
