"""Whole-document routes used by the browser client."""

import json

import pytest
from httpx import ASGITransport, AsyncClient

from casetrack.core.config import get_settings
from casetrack.main import create_app


async def test_db_returns_stored_document(
    client: AsyncClient, data_file, admin_headers: dict[str, str]
) -> None:
    response = await client.get("/api/db", headers=admin_headers)
    assert response.status_code == 200
    assert response.json() == json.loads(data_file.read_text(encoding="utf-8"))
    assert {"users", "cases", "tribunals", "phases", "statuses"} <= set(response.json())


async def test_snapshot_routes_require_admin(
    client: AsyncClient, data_file, staff_headers: dict[str, str]
) -> None:
    before = data_file.read_text(encoding="utf-8")
    takeover = {
        "users": [
            {"id": 1, "name": "Intruder", "email": "x@evil.test", "permission": "adm", "password": "pw"}
        ]
    }

    assert (await client.get("/api/db")).status_code == 401
    assert (await client.post("/api/save", json=takeover)).status_code == 401
    assert (await client.get("/api/db", headers=staff_headers)).status_code == 403
    denied = await client.post("/api/save", headers=staff_headers, json=takeover)
    assert denied.status_code == 403
    assert denied.json()["error"] == "PERMISSION_DENIED"
    assert data_file.read_text(encoding="utf-8") == before

    login = await client.post("/api/v1/auth/login", json={"email": "x@evil.test", "password": "pw"})
    assert login.status_code == 401


async def test_status_is_public(client: AsyncClient) -> None:
    assert (await client.get("/api/status")).status_code == 200


async def test_save_replaces_workspace(
    client: AsyncClient, data_file, admin_headers: dict[str, str]
) -> None:
    document = (await client.get("/api/db", headers=admin_headers)).json()
    document["cases"] = [
        {"id": 41, "id2": "MST00041", "processoNumero": "9999", "status": "Em andamento"}
    ]
    document["uiPreferences"] = {"dense": True}

    response = await client.post("/api/save", headers=admin_headers, json=document)
    assert response.status_code == 200
    assert response.json() == {"success": True}
    stored = json.loads(data_file.read_text(encoding="utf-8"))
    assert stored["uiPreferences"] == {"dense": True}
    assert [(c["id"], c["processoNumero"]) for c in stored["cases"]] == [(41, "9999")]
    assert stored["users"] == document["users"]

    cases = (await client.get("/api/v1/cases", headers=admin_headers)).json()
    assert [c["id"] for c in cases] == [41]
    created = await client.post(
        "/api/v1/cases", headers=admin_headers, json={"process_number": "1"}
    )
    assert created.json()["id"] == 42


async def test_save_hashes_plaintext_passwords(
    client: AsyncClient, data_file, admin_headers: dict[str, str]
) -> None:
    document = (await client.get("/api/db", headers=admin_headers)).json()
    document["users"].append(
        {"id": 9, "name": "Eva Rocha", "email": "eva@firm.test", "permission": "user", "password": "pw"}
    )

    response = await client.post("/api/save", headers=admin_headers, json=document)
    assert response.status_code == 200
    eva = json.loads(data_file.read_text(encoding="utf-8"))["users"][-1]
    assert "password" not in eva
    assert eva["passwordHash"].startswith("$2")

    login = await client.post("/api/v1/auth/login", json={"email": "eva@firm.test", "password": "pw"})
    assert login.status_code == 200


@pytest.mark.parametrize(
    "collection,records",
    [
        ("cases", [{"id": 1, "processoNumero": "DUP"}, {"id": 2, "processoNumero": " DUP "}]),
        ("cases", [{"id": 2, "processoNumero": "A"}, {"id": 2, "processoNumero": "B"}]),
        (
            "users",
            [
                {"id": 1, "name": "Ana Admin", "email": "ana@firm.test", "permission": "adm"},
                {"id": 2, "name": "Ana Clone", "email": " ANA@firm.test ", "permission": "user"},
            ],
        ),
        ("statuses", [{"id": 1, "name": "Aguardando"}, {"id": 2, "name": "aguardando"}]),
    ],
)
async def test_save_rejects_repeated_keys(
    client: AsyncClient, data_file, admin_headers: dict[str, str], collection, records
) -> None:
    before = data_file.read_text(encoding="utf-8")
    document = json.loads(before)
    document[collection] = records

    response = await client.post("/api/save", headers=admin_headers, json=document)
    assert response.status_code == 400
    assert response.json()["error"] == "INVALID_SNAPSHOT"
    assert data_file.read_text(encoding="utf-8") == before
    statuses = await client.get("/api/v1/statuses", headers=admin_headers)
    assert len(statuses.json()) == 3


async def test_save_rejects_non_objects_and_invalid_snapshots(
    client: AsyncClient, data_file, admin_headers: dict[str, str]
) -> None:
    before = data_file.read_text(encoding="utf-8")
    not_object = await client.post("/api/save", headers=admin_headers, json=[1, 2, 3])
    assert not_object.status_code == 400
    not_json = await client.post(
        "/api/save",
        content=b"{broken",
        headers={**admin_headers, "content-type": "application/json"},
    )
    assert not_json.status_code == 400
    invalid = await client.post(
        "/api/save", headers=admin_headers, json={"cases": [{"processoNumero": "no id"}]}
    )
    assert invalid.status_code == 400
    assert invalid.json()["error"] == "INVALID_SNAPSHOT"
    assert data_file.read_text(encoding="utf-8") == before


async def test_oversized_request_is_413(workspace, monkeypatch) -> None:
    monkeypatch.setattr(get_settings(), "max_request_bytes", 100)
    small_app = create_app()
    small_app.state.workspace = workspace
    async with AsyncClient(transport=ASGITransport(app=small_app), base_url="http://test") as ac:
        response = await ac.post("/api/save", content=b"x" * 200)
    assert response.status_code == 413
    assert response.json()["error"] == "PAYLOAD_TOO_LARGE"
