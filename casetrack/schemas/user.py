"""User API schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from casetrack.domain.enums import Permission


class UserWriteRequest(BaseModel):
    """Request body for creating or replacing a user.

    On update, an omitted password keeps the current one.
    """

    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., min_length=3, max_length=320)
    permission: Permission = Permission.STANDARD
    password: str | None = Field(default=None, min_length=1, max_length=256)

    @field_validator("email")
    @classmethod
    def _email_has_at(cls, v: str) -> str:
        v = v.strip()
        if "@" not in v:
            raise ValueError("email must contain '@'")
        return v

    @field_validator("permission", mode="before")
    @classmethod
    def _legacy_permission(cls, v: object) -> object:
        """Accept the legacy 'adm' / 'user' values."""
        legacy = {"adm": Permission.ADMIN, "user": Permission.STANDARD}
        return legacy.get(v, v) if isinstance(v, str) else v


class UserResponse(BaseModel):
    """User without credentials."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    permission: Permission
