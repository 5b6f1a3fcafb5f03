"""Front-end bundle serving."""

from httpx import AsyncClient

from casetrack.core.config import get_settings


async def test_bundle_files_and_client_routes(client: AsyncClient, tmp_path, monkeypatch) -> None:
    bundle = tmp_path / "dist"
    (bundle / "assets").mkdir(parents=True)
    (bundle / "index.html").write_text("<html>casetrack app</html>", encoding="utf-8")
    (bundle / "assets" / "app.js").write_text("console.log('x')", encoding="utf-8")
    monkeypatch.setattr(get_settings(), "static_dir", str(bundle))

    asset = await client.get("/assets/app.js")
    assert asset.status_code == 200
    assert "console.log" in asset.text

    for path in ("/", "/kanban", "/cases/12"):
        page = await client.get(path)
        assert page.status_code == 200
        assert "casetrack app" in page.text


async def test_paths_cannot_escape_the_bundle(client: AsyncClient, tmp_path, monkeypatch) -> None:
    bundle = tmp_path / "dist"
    bundle.mkdir()
    (bundle / "index.html").write_text("<html>index</html>", encoding="utf-8")
    (tmp_path / "secret.txt").write_text("top secret", encoding="utf-8")
    monkeypatch.setattr(get_settings(), "static_dir", str(bundle))

    response = await client.get("/..%2Fsecret.txt")
    assert "top secret" not in response.text
