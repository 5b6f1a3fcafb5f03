"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags.
"""

from fastapi import APIRouter

from casetrack.api.v1.endpoints import (
    auth,
    cases,
    dashboard,
    health,
    history,
    imports,
    lookups,
    users,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(cases.router, prefix="/cases", tags=["cases"])
api_router.include_router(imports.router, prefix="/imports", tags=["imports"])
api_router.include_router(history.router, prefix="/history", tags=["history"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(lookups.tribunals_router, prefix="/tribunals", tags=["lookups"])
api_router.include_router(lookups.phases_router, prefix="/phases", tags=["lookups"])
api_router.include_router(lookups.statuses_router, prefix="/statuses", tags=["lookups"])
