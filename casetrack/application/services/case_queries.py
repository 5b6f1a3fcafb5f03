"""Read-only views over the case collection.

Partitions (active / archived), personal lists, free-text search, kanban
board grouping, calendar grouping and the flattened tramitation history.
Nothing here mutates cases; deadline status is evaluated on demand.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import fields
from datetime import date

from casetrack.application.dtos.history import HistoryRow
from casetrack.application.dtos.views import UNASSIGNED_COLUMN, BoardColumn, CalendarDay
from casetrack.domain.entities import CaseDetails, CaseEntity, UserEntity
from casetrack.domain.enums import BoardGrouping, CaseScope, Priority
from casetrack.domain.exceptions import ValidationException
from casetrack.shared.utils.datetime import parse_calendar_date
from casetrack.shared.utils.text import fold

HISTORY_SORT_KEYS = ("timestamp", "process_number", "display_id", "from_user", "to_user", "deadline")

_SEARCHABLE_FIELDS = tuple(f.name for f in fields(CaseDetails) if f.name != "extra")

# Case attribute each board grouping reads.
_GROUP_FIELD = {
    BoardGrouping.STATUS: "status",
    BoardGrouping.PHASE: "phase",
    BoardGrouping.TRIBUNAL: "tribunal",
    BoardGrouping.ASSIGNEE: "assignee_name",
    BoardGrouping.CO_RESPONSIBLE: "co_responsible_name",
}


def by_scope(
    cases: Iterable[CaseEntity], scope: CaseScope, archived_status_name: str
) -> list[CaseEntity]:
    """Active cases are those whose status is not the archived label."""
    if scope == CaseScope.ALL:
        return list(cases)
    archived = scope == CaseScope.ARCHIVED
    return [c for c in cases if c.is_archived(archived_status_name) == archived]


def assigned_to(cases: Iterable[CaseEntity], user: UserEntity) -> list[CaseEntity]:
    """Cases currently assigned to the user (matched by email)."""
    return [c for c in cases if c.assignee_email and c.assignee_email == user.email]


def involving(cases: Iterable[CaseEntity], user: UserEntity) -> list[CaseEntity]:
    """Cases the user holds now or has sent or received in the past."""
    return [c for c in cases if c.involves(user.name, user.email)]


def matches_search(case: CaseEntity, term: str) -> bool:
    """Case- and accent-insensitive substring match over every case field."""
    needle = fold(term)
    if not needle:
        return True
    haystack = [case.display_id, str(case.id)]
    for name in _SEARCHABLE_FIELDS:
        value = getattr(case, name)
        haystack.append(value.value if isinstance(value, Priority) else str(value))
    return any(needle in fold(text) for text in haystack)


def filter_cases(
    cases: Iterable[CaseEntity],
    search: str | None = None,
    priority: Priority | None = None,
    assignee: str | None = None,
) -> list[CaseEntity]:
    """Apply the optional search, priority and assignee-name filters."""
    result = list(cases)
    if search:
        result = [c for c in result if matches_search(c, search)]
    if priority is not None:
        result = [c for c in result if c.priority == priority]
    if assignee:
        result = [c for c in result if c.assignee_name == assignee]
    return result


def board_columns(
    cases: Sequence[CaseEntity],
    grouping: BoardGrouping,
    catalog_names: Sequence[str],
    owner_name: str,
) -> list[BoardColumn]:
    """Group cases into kanban columns.

    Status, phase and tribunal boards use the catalog names as columns, in
    catalog order. Assignee and co-responsible boards open with an
    unassigned column followed by the distinct names found on the cases,
    sorted. Cases whose value matches no column land in a trailing
    unassigned column so that no case disappears from the board.
    """
    attr = _GROUP_FIELD[grouping]
    person_board = grouping in (BoardGrouping.ASSIGNEE, BoardGrouping.CO_RESPONSIBLE)
    if person_board:
        names = {getattr(c, attr) for c in cases} - {"", owner_name}
        titles = [UNASSIGNED_COLUMN, *sorted(names, key=fold)]
    else:
        titles = list(catalog_names)

    columns: dict[str, list[CaseEntity]] = {title: [] for title in titles}
    leftovers: list[CaseEntity] = []
    for case in cases:
        value = getattr(case, attr)
        if not value or (person_board and value == owner_name):
            value = UNASSIGNED_COLUMN
        bucket = columns.get(value)
        if bucket is None:
            leftovers.append(case)
        else:
            bucket.append(case)

    result = [
        BoardColumn(
            key=key,
            title="Unassigned" if key == UNASSIGNED_COLUMN else key,
            cases=items,
        )
        for key, items in columns.items()
    ]
    if leftovers:
        result.append(BoardColumn(key=UNASSIGNED_COLUMN, title="Unassigned", cases=leftovers))
    return result


def calendar_days(cases: Iterable[CaseEntity], year: int, month: int) -> list[CalendarDay]:
    """Cases grouped by final deadline for one month; unparseable dates are skipped."""
    if not 1 <= month <= 12:
        raise ValidationException("Month must be between 1 and 12", field="month")
    grouped: dict[date, list[CaseEntity]] = {}
    for case in cases:
        due = parse_calendar_date(case.final_deadline)
        if due is None or due.year != year or due.month != month:
            continue
        grouped.setdefault(due, []).append(case)
    return [CalendarDay(day=day, cases=grouped[day]) for day in sorted(grouped)]


def flatten_history(cases: Iterable[CaseEntity]) -> list[HistoryRow]:
    return [
        HistoryRow(
            case_id=case.id,
            display_id=case.display_id,
            process_number=case.process_number,
            from_user=entry.from_user,
            to_user=entry.to_user,
            timestamp=entry.timestamp,
            deadline=entry.deadline,
        )
        for case in cases
        for entry in case.tramitation_log
    ]


def history(
    cases: Iterable[CaseEntity],
    search: str | None = None,
    sort: str = "timestamp",
    descending: bool = True,
) -> list[HistoryRow]:
    """Flattened tramitation history, newest first unless asked otherwise.

    search matches process number, sender or recipient (case-insensitive).
    """
    if sort not in HISTORY_SORT_KEYS:
        raise ValidationException(
            f"Cannot sort history by '{sort}'", field="sort"
        )
    rows = flatten_history(cases)
    needle = fold(search)
    if needle:
        rows = [
            r
            for r in rows
            if needle in fold(r.process_number)
            or needle in fold(r.from_user)
            or needle in fold(r.to_user)
        ]
    rows.sort(key=lambda r: getattr(r, sort), reverse=descending)
    return rows
