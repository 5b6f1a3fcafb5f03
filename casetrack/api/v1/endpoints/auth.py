"""Auth API: login and current user.

JWT created via infrastructure security; users come from the workspace directory.
"""

import asyncio
import logging

from fastapi import APIRouter, Request

from casetrack.api.v1.dependencies import CurrentUser, WorkspaceDep
from casetrack.core.limiter import limit_auth
from casetrack.domain.exceptions import AuthenticationException
from casetrack.infrastructure.security.jwt import create_access_token
from casetrack.infrastructure.security.password import verify_password
from casetrack.schemas.auth import LoginRequest, TokenResponse
from casetrack.schemas.user import UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
@limit_auth
async def login(request: Request, body: LoginRequest, workspace: WorkspaceDep):
    """Authenticate with email and password; return a bearer token."""
    user = await asyncio.to_thread(
        workspace.directory.authenticate, body.email, body.password, verify_password
    )
    if user is None:
        logger.info("Failed login for %s", body.email.strip().lower())
        raise AuthenticationException("Invalid email or password")
    token = create_access_token(user.id, user.permission.value)
    return TokenResponse(access_token=token, user=UserResponse.model_validate(user))


@router.get("/me", response_model=UserResponse)
async def read_me(current_user: CurrentUser):
    """Return the authenticated user."""
    return UserResponse.model_validate(current_user)
