"""Case import API schemas."""

from typing import Any

from pydantic import BaseModel, Field

from casetrack.application.dtos.imports import ImportReport
from casetrack.schemas.case import CaseResponse


class ImportRowsRequest(BaseModel):
    """Rows already parsed from a spreadsheet: one header -> value mapping per row."""

    rows: list[dict[str, Any]] = Field(..., min_length=1)


class ImportPasteRequest(BaseModel):
    """Text copied from a spreadsheet; the first line holds the headers."""

    text: str = Field(..., min_length=1)


class ImportReportResponse(BaseModel):
    accepted: list[CaseResponse]
    accepted_count: int
    rejected_duplicate_in_system: list[str]
    rejected_duplicate_in_file: list[str]
    skipped_without_number: int
    summary: str

    @classmethod
    def from_report(cls, report: ImportReport) -> "ImportReportResponse":
        return cls(
            accepted=[CaseResponse.from_entity(c) for c in report.accepted],
            accepted_count=report.accepted_count,
            rejected_duplicate_in_system=report.rejected_duplicate_in_system,
            rejected_duplicate_in_file=report.rejected_duplicate_in_file,
            skipped_without_number=report.skipped_without_number,
            summary=report.summary(),
        )
