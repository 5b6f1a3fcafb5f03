"""Serves the single-page front-end bundle.

Registered after every API router: it answers all remaining GET paths with
the matching file from the bundle, or index.html so client-side routes work.
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse, Response

from casetrack.api.v1.dependencies import SettingsDep
from casetrack.pages.root import render_backend_running_page

router = APIRouter(include_in_schema=False)


def _bundle_file(static_dir: Path, relative: str) -> Path | None:
    """Resolve a path inside the bundle; None if missing or outside it."""
    if not relative:
        return None
    root = static_dir.resolve()
    candidate = (root / relative).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        return None
    return candidate


@router.get("/{full_path:path}")
async def serve_spa(full_path: str, settings: SettingsDep) -> Response:
    if full_path == "api" or full_path.startswith("api/"):
        return JSONResponse(
            status_code=404,
            content={"error": "NOT_FOUND", "message": f"No API route for /{full_path}"},
        )
    static_dir = Path(settings.static_dir)
    asset = _bundle_file(static_dir, full_path)
    if asset is not None:
        return FileResponse(asset)
    index = static_dir / "index.html"
    if index.is_file():
        return FileResponse(index)
    return HTMLResponse(
        status_code=404,
        content=render_backend_running_page(
            settings.app_name, settings.port, settings.static_dir
        ),
    )
