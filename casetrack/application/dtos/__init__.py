"""Application DTOs (read models returned by services)."""

from casetrack.application.dtos.dashboard import (
    CaseSummary,
    DeadlineBuckets,
    GlobalDashboard,
    NameCount,
    PersonalDashboard,
)
from casetrack.application.dtos.history import HistoryRow
from casetrack.application.dtos.imports import ImportReport
from casetrack.application.dtos.snapshot import WorkspaceState
from casetrack.application.dtos.views import UNASSIGNED_COLUMN, BoardColumn, CalendarDay

__all__ = [
    "UNASSIGNED_COLUMN",
    "BoardColumn",
    "CalendarDay",
    "CaseSummary",
    "DeadlineBuckets",
    "GlobalDashboard",
    "HistoryRow",
    "ImportReport",
    "NameCount",
    "PersonalDashboard",
    "WorkspaceState",
]
