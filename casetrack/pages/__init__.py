from casetrack.pages.root import render_backend_running_page
from casetrack.pages.spa import router as spa_router

__all__ = ["render_backend_running_page", "spa_router"]
