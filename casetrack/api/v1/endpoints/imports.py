"""Import API: spreadsheet rows or pasted text become new cases.

Both routes run the same reconciliation: rows without a process number are
skipped, numbers already stored or repeated in the batch are rejected, and
the accepted cases are appended in one save.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from casetrack.api.v1.dependencies import WorkspaceDep, require_admin_for
from casetrack.application.services.tabular_import import drafts_from_rows, rows_from_paste
from casetrack.core.limiter import limit_import
from casetrack.domain.entities import UserEntity
from casetrack.schemas.imports import (
    ImportPasteRequest,
    ImportReportResponse,
    ImportRowsRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

AdminImporter = Annotated[UserEntity, Depends(require_admin_for("case", "import"))]


@router.post("/rows", response_model=ImportReportResponse)
@limit_import
async def import_rows(
    request: Request,
    body: ImportRowsRequest,
    workspace: WorkspaceDep,
    current_user: AdminImporter,
):
    """Import rows already parsed from a spreadsheet (header -> cell value)."""
    report = await workspace.import_cases(drafts_from_rows(body.rows))
    logger.info("%s imported rows: %s", current_user.email, report.summary())
    return ImportReportResponse.from_report(report)


@router.post("/paste", response_model=ImportReportResponse)
@limit_import
async def import_paste(
    request: Request,
    body: ImportPasteRequest,
    workspace: WorkspaceDep,
    current_user: AdminImporter,
):
    """Import tab-separated text pasted from a spreadsheet; the first line holds headers."""
    report = await workspace.import_cases(drafts_from_rows(rows_from_paste(body.text)))
    logger.info("%s imported pasted text: %s", current_user.email, report.summary())
    return ImportReportResponse.from_report(report)
