"""Users API (admin only): list, create, replace, delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from casetrack.api.v1.dependencies import WorkspaceDep, require_admin_for
from casetrack.domain.entities import UserEntity
from casetrack.schemas.user import UserResponse, UserWriteRequest

router = APIRouter()

UserAdmin = Annotated[UserEntity, Depends(require_admin_for("user", "manage"))]


@router.get("", response_model=list[UserResponse])
async def list_users(workspace: WorkspaceDep, _admin: UserAdmin):
    return [UserResponse.model_validate(u) for u in workspace.directory.list_users()]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(body: UserWriteRequest, workspace: WorkspaceDep, _admin: UserAdmin):
    """Register a user. Emails are unique (case-insensitive)."""
    user = await workspace.add_user(body.name, body.email, body.permission, body.password)
    return UserResponse.model_validate(user)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: int, body: UserWriteRequest, workspace: WorkspaceDep, _admin: UserAdmin
):
    """Replace a user's profile; an omitted password keeps the current one."""
    user = await workspace.update_user(
        user_id, body.name, body.email, body.permission, body.password
    )
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, workspace: WorkspaceDep, _admin: UserAdmin):
    await workspace.delete_user(user_id)
