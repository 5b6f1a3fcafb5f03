"""Application lifespan: startup and shutdown.

Startup wires the JSON snapshot store and codec and opens the workspace,
which loads (or creates) the data file. Nothing needs closing on shutdown:
every mutation is already on disk when its request returns.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from casetrack.application.services.workspace import Workspace, WorkspacePolicy
from casetrack.core.config import Settings, get_settings
from casetrack.infrastructure.persistence import JsonSnapshotStore, SnapshotCodec
from casetrack.infrastructure.security.password import hash_password
from casetrack.shared.telemetry import setup_logging

logger = logging.getLogger(__name__)


def build_policy(settings: Settings) -> WorkspacePolicy:
    return WorkspacePolicy(
        owner_name=settings.owner_name,
        archived_status_name=settings.archived_status_name,
        import_actor_name=settings.import_actor_name,
    )


async def open_workspace(settings: Settings) -> Workspace:
    """Open the workspace stored in settings.data_file."""
    return await Workspace.open(
        JsonSnapshotStore(settings.data_file),
        SnapshotCodec(hash_password),
        build_policy(settings),
        hash_password,
    )


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and load the workspace, then serve."""
    settings = get_settings()
    setup_logging()

    app.state.workspace = await open_workspace(settings)
    logger.info(
        "%s %s serving %s on port %d",
        settings.app_name,
        settings.app_version,
        settings.data_file,
        settings.port,
    )

    yield

    app.state.workspace = None
    logger.info("Workspace released")
