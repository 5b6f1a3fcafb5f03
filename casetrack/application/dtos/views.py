"""DTOs for derived case views (board columns, calendar days)."""

from dataclasses import dataclass, field
from datetime import date

from casetrack.domain.entities import CaseEntity

UNASSIGNED_COLUMN = "N/D"


@dataclass(frozen=True)
class BoardColumn:
    """One kanban column. key is the value a case must carry to sit in it."""

    key: str
    title: str
    cases: list[CaseEntity] = field(default_factory=list)


@dataclass(frozen=True)
class CalendarDay:
    """Cases whose final deadline falls on day."""

    day: date
    cases: list[CaseEntity] = field(default_factory=list)
