"""Lookup API: tribunals, phases and statuses.

Any signed-in user may list them; only admins may change them. Renaming an
item does not touch the cases that already carry the old name.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from casetrack.api.v1.dependencies import CurrentUser, WorkspaceDep, require_admin_for
from casetrack.domain.entities import UserEntity
from casetrack.schemas.lookup import LookupResponse, LookupWriteRequest


def build_lookup_router(kind: str) -> APIRouter:
    """CRUD routes for one lookup catalog."""
    router = APIRouter()
    LookupAdmin = Annotated[UserEntity, Depends(require_admin_for(kind, "manage"))]

    @router.get("", response_model=list[LookupResponse])
    async def list_items(workspace: WorkspaceDep, _user: CurrentUser):
        return [LookupResponse.model_validate(i) for i in workspace.catalog(kind).list_items()]

    @router.post("", response_model=LookupResponse, status_code=status.HTTP_201_CREATED)
    async def create_item(
        body: LookupWriteRequest, workspace: WorkspaceDep, _admin: LookupAdmin
    ):
        return LookupResponse.model_validate(await workspace.add_lookup(kind, body.name))

    @router.put("/{item_id}", response_model=LookupResponse)
    async def rename_item(
        item_id: int, body: LookupWriteRequest, workspace: WorkspaceDep, _admin: LookupAdmin
    ):
        item = await workspace.rename_lookup(kind, item_id, body.name)
        return LookupResponse.model_validate(item)

    @router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_item(item_id: int, workspace: WorkspaceDep, _admin: LookupAdmin):
        await workspace.delete_lookup(kind, item_id)

    return router


tribunals_router = build_lookup_router("tribunal")
phases_router = build_lookup_router("phase")
statuses_router = build_lookup_router("status")
