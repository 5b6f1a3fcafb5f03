"""Tests for read-only case views: scopes, search, boards, calendar, history."""

from datetime import date

import pytest

from casetrack.application.dtos.views import UNASSIGNED_COLUMN
from casetrack.application.services import case_queries
from casetrack.domain.entities import CaseEntity, TramitationEntry, UserEntity
from casetrack.domain.enums import BoardGrouping, CaseScope, Priority
from casetrack.domain.exceptions import ValidationException

OWNER = "Ms Tributário"


def _case(case_id: int, **kwargs) -> CaseEntity:
    return CaseEntity(id=case_id, display_id=f"MST{case_id:05d}", owner_name=OWNER, **kwargs)


@pytest.fixture
def cases() -> list[CaseEntity]:
    return [
        _case(
            1,
            process_number="0001",
            author="José Ação",
            status="Em andamento",
            assignee_name="Bruno Silva",
            assignee_email="bruno@firm.test",
            final_deadline="2024-05-20",
            priority=Priority.HIGH,
            tramitation_log=[
                TramitationEntry("Ana Admin", "Bruno Silva", "2024-05-01T10:00:00.000Z"),
            ],
        ),
        _case(
            2,
            process_number="0002",
            status="Arquivado",
            assignee_name="Carla Souza",
            assignee_email="carla@firm.test",
            tramitation_log=[
                TramitationEntry("Ana Admin", "Bruno Silva", "2024-04-01T10:00:00.000Z"),
                TramitationEntry("Bruno Silva", "Carla Souza", "2024-04-02T10:00:00.000Z"),
            ],
        ),
        _case(3, process_number="0003", status="", assignee_name=OWNER, final_deadline="20/05/2024"),
    ]


BRUNO = UserEntity(id=2, name="Bruno Silva", email="bruno@firm.test")


def test_scopes_partition_by_archived_status(cases) -> None:
    active = case_queries.by_scope(cases, CaseScope.ACTIVE, "Arquivado")
    archived = case_queries.by_scope(cases, CaseScope.ARCHIVED, "Arquivado")
    assert [c.id for c in active] == [1, 3]
    assert [c.id for c in archived] == [2]
    assert len(case_queries.by_scope(cases, CaseScope.ALL, "Arquivado")) == 3


def test_assigned_to_and_involving(cases) -> None:
    assert [c.id for c in case_queries.assigned_to(cases, BRUNO)] == [1]
    assert [c.id for c in case_queries.involving(cases, BRUNO)] == [1, 2]


def test_search_ignores_case_and_accents(cases) -> None:
    assert [c.id for c in case_queries.filter_cases(cases, search="jose acao")] == [1]
    assert [c.id for c in case_queries.filter_cases(cases, search="MST00002")] == [2]
    assert len(case_queries.filter_cases(cases, search="   ")) == 3


def test_priority_and_assignee_filters(cases) -> None:
    assert [c.id for c in case_queries.filter_cases(cases, priority=Priority.HIGH)] == [1]
    assert [c.id for c in case_queries.filter_cases(cases, assignee="Carla Souza")] == [2]


def test_status_board_uses_catalog_and_keeps_leftovers(cases) -> None:
    columns = case_queries.board_columns(
        cases, BoardGrouping.STATUS, ["Aguardando", "Em andamento"], OWNER
    )
    assert [c.key for c in columns] == ["Aguardando", "Em andamento", UNASSIGNED_COLUMN]
    assert [c.id for c in columns[1].cases] == [1]
    assert sorted(c.id for c in columns[2].cases) == [2, 3]


def test_assignee_board_treats_owner_as_unassigned(cases) -> None:
    columns = case_queries.board_columns(cases, BoardGrouping.ASSIGNEE, [], OWNER)
    assert [c.key for c in columns] == [UNASSIGNED_COLUMN, "Bruno Silva", "Carla Souza"]
    assert columns[0].title == "Unassigned"
    assert [c.id for c in columns[0].cases] == [3]


def test_calendar_groups_by_final_deadline(cases) -> None:
    days = case_queries.calendar_days(cases, 2024, 5)
    assert len(days) == 1
    assert days[0].day == date(2024, 5, 20)
    assert [c.id for c in days[0].cases] == [1, 3]
    assert case_queries.calendar_days(cases, 2024, 6) == []
    with pytest.raises(ValidationException):
        case_queries.calendar_days(cases, 2024, 13)


def test_history_is_newest_first_and_searchable(cases) -> None:
    rows = case_queries.history(cases)
    assert [r.timestamp[:10] for r in rows] == ["2024-05-01", "2024-04-02", "2024-04-01"]
    only_carla = case_queries.history(cases, search="carla")
    assert [(r.from_user, r.to_user) for r in only_carla] == [("Bruno Silva", "Carla Souza")]


def test_history_sort_options(cases) -> None:
    rows = case_queries.history(cases, sort="process_number", descending=False)
    assert [r.process_number for r in rows] == ["0001", "0002", "0002"]
    with pytest.raises(ValidationException):
        case_queries.history(cases, sort="password")
