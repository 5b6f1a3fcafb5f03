"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See casetrack.core.lifespan and
casetrack.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and
clear the get_settings cache) before calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from casetrack.api.snapshot import router as snapshot_router
from casetrack.api.v1 import api_router
from casetrack.core.config import get_settings
from casetrack.core.exception_handlers import register_exception_handlers
from casetrack.core.lifespan import create_lifespan
from casetrack.core.limiter import limiter
from casetrack.middleware import RequestLoggingMiddleware, RequestSizeLimitMiddleware
from casetrack.pages import spa_router


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    # First added = innermost. Order seen by a request: size limit -> logging -> CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestSizeLimitMiddleware, max_bytes=settings.max_request_bytes)

    app.include_router(api_router, prefix="/api/v1")
    app.include_router(snapshot_router, prefix="/api")
    # Catch-all for the front-end bundle; must stay last.
    app.include_router(spa_router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve with uvicorn on settings.host:settings.port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("casetrack.main:app", host=settings.host, port=settings.port)
