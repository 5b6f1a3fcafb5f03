"""Auth API schemas."""

from pydantic import BaseModel, Field

from casetrack.schemas.user import UserResponse


class LoginRequest(BaseModel):
    """Request body for POST /auth/login."""

    email: str = Field(..., min_length=3, max_length=320)
    password: str = Field(..., min_length=1, max_length=256)


class TokenResponse(BaseModel):
    """Bearer token plus the authenticated user."""

    access_token: str
    token_type: str = "bearer"
    user: UserResponse
