"""Imports, tramitation history and dashboards."""

from httpx import AsyncClient


async def test_import_rows_reports_duplicates(
    client: AsyncClient, admin_headers: dict[str, str]
) -> None:
    await client.post("/api/v1/cases", headers=admin_headers, json={"process_number": "P2"})
    response = await client.post(
        "/api/v1/imports/rows",
        headers=admin_headers,
        json={
            "rows": [
                {"PROCESSO NÚMERO": "P1", "Atribuído a": "bruno silva", "Prioridade": "Alta"},
                {"PROCESSO NÚMERO": "P1"},
                {"PROCESSO NÚMERO": "P2"},
                {"AUTOR": "no number"},
            ]
        },
    )
    assert response.status_code == 200
    report = response.json()
    assert report["accepted_count"] == 1
    assert report["rejected_duplicate_in_file"] == ["P1"]
    assert report["rejected_duplicate_in_system"] == ["P2"]
    assert report["skipped_without_number"] == 1
    accepted = report["accepted"][0]
    assert accepted["assignee_name"] == "Bruno Silva"
    assert accepted["assignee_email"] == "bruno@firm.test"
    assert accepted["priority"] == "High"
    assert accepted["tramitation_log"][0]["from_user"] == "Import process"


async def test_import_paste(client: AsyncClient, admin_headers: dict[str, str]) -> None:
    response = await client.post(
        "/api/v1/imports/paste",
        headers=admin_headers,
        json={"text": "Process Number\tAuthor\n0001\tJoão\n0002\tMaria\n"},
    )
    assert response.status_code == 200
    assert response.json()["accepted_count"] == 2
    cases = (await client.get("/api/v1/cases", headers=admin_headers)).json()
    assert sorted(c["author"] for c in cases) == ["João", "Maria"]


async def test_imports_are_admin_only(client: AsyncClient, staff_headers: dict[str, str]) -> None:
    response = await client.post(
        "/api/v1/imports/paste", headers=staff_headers, json={"text": "Process Number\n1\n"}
    )
    assert response.status_code == 403


async def test_history_scoped_to_involvement(
    client: AsyncClient, admin_headers: dict[str, str], staff_headers: dict[str, str]
) -> None:
    await client.post(
        "/api/v1/cases", headers=admin_headers, json={"process_number": "A", "assignee_name": "Bruno Silva"}
    )
    await client.post(
        "/api/v1/cases", headers=admin_headers, json={"process_number": "B", "assignee_name": "Carla Souza"}
    )
    everything = await client.get("/api/v1/history", headers=admin_headers)
    assert len(everything.json()) == 2
    mine = await client.get("/api/v1/history", headers=staff_headers)
    assert [r["process_number"] for r in mine.json()] == ["A"]

    ordered = await client.get(
        "/api/v1/history?sort=process_number&direction=asc", headers=admin_headers
    )
    assert [r["process_number"] for r in ordered.json()] == ["A", "B"]
    bad = await client.get("/api/v1/history?sort=secret", headers=admin_headers)
    assert bad.status_code == 400


async def test_dashboards(
    client: AsyncClient, admin_headers: dict[str, str], staff_headers: dict[str, str]
) -> None:
    for number, assignee, priority in (("A", "Bruno Silva", "High"), ("B", "Carla Souza", "Low")):
        await client.post(
            "/api/v1/cases",
            headers=admin_headers,
            json={"process_number": number, "assignee_name": assignee, "priority": priority},
        )

    summary = (await client.get("/api/v1/dashboard/summary", headers=staff_headers)).json()
    assert summary == {"total": 1, "by_priority": {"High": 1, "Medium": 0, "Low": 0}}

    assert (await client.get("/api/v1/dashboard/global", headers=staff_headers)).status_code == 403
    overall = (await client.get("/api/v1/dashboard/global", headers=admin_headers)).json()
    assert overall["total_cases"] == 2
    assert {p["name"] for p in overall["top_assignees"]} == {"Bruno Silva", "Carla Souza"}

    personal = (await client.get("/api/v1/dashboard/me", headers=staff_headers)).json()
    assert personal["user_name"] == "Bruno Silva"
    assert personal["assigned_to_me"] == 1
    assert personal["deadlines"]["unset"] == 1
