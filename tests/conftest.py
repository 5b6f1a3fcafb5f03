"""Pytest configuration and fixtures for casetrack.

Every test that touches the HTTP layer gets its own workspace backed by a
JSON file in a temporary directory. The ASGI transport does not run the
lifespan, so the fixture puts the workspace on app.state itself.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("STATIC_DIR", "/nonexistent-casetrack-bundle")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from casetrack.application.services.workspace import Workspace  # noqa: E402
from casetrack.core.config import get_settings  # noqa: E402
from casetrack.core.lifespan import build_policy  # noqa: E402
from casetrack.domain.entities import UserEntity  # noqa: E402
from casetrack.domain.enums import Permission  # noqa: E402
from casetrack.infrastructure.persistence import JsonSnapshotStore, SnapshotCodec  # noqa: E402
from casetrack.infrastructure.security.jwt import create_access_token  # noqa: E402
from casetrack.infrastructure.security.password import hash_password  # noqa: E402
from casetrack.main import app  # noqa: E402

ADMIN_PASSWORD = "admin-password"
STAFF_PASSWORD = "staff-password"


@pytest.fixture
def data_file(tmp_path):
    """Path of the JSON snapshot for this test (not created yet)."""
    return tmp_path / "database.json"


@pytest.fixture
async def workspace(data_file) -> Workspace:
    """Workspace with an admin, two staff members and the usual lookups."""
    ws = await Workspace.open(
        JsonSnapshotStore(data_file),
        SnapshotCodec(hash_password),
        build_policy(get_settings()),
        hash_password,
    )
    await ws.add_user("Ana Admin", "ana@firm.test", Permission.ADMIN, ADMIN_PASSWORD)
    await ws.add_user("Bruno Silva", "bruno@firm.test", Permission.STANDARD, STAFF_PASSWORD)
    await ws.add_user("Carla Souza", "carla@firm.test", Permission.STANDARD, STAFF_PASSWORD)
    for name in ("Em andamento", "Aguardando", "Arquivado"):
        await ws.add_lookup("status", name)
    for name in ("Perícia", "Laudo"):
        await ws.add_lookup("phase", name)
    await ws.add_lookup("tribunal", "TJSP")
    return ws


@pytest.fixture
def admin(workspace: Workspace) -> UserEntity:
    return workspace.directory.find_by_email("ana@firm.test")


@pytest.fixture
def staff(workspace: Workspace) -> UserEntity:
    return workspace.directory.find_by_email("bruno@firm.test")


@pytest.fixture
def admin_headers(admin: UserEntity) -> dict[str, str]:
    token = create_access_token(admin.id, admin.permission.value)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def staff_headers(staff: UserEntity) -> dict[str, str]:
    token = create_access_token(staff.id, staff.permission.value)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def client(workspace: Workspace) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    app.state.workspace = workspace
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.state.workspace = None
