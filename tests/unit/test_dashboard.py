"""Tests for dashboard aggregates."""

from datetime import date

from casetrack.application.services import dashboard_service
from casetrack.domain.entities import CaseEntity, UserEntity
from casetrack.domain.enums import Priority

TODAY = date(2024, 5, 10)


def _case(case_id: int, **kwargs) -> CaseEntity:
    return CaseEntity(id=case_id, display_id=f"MST{case_id:05d}", **kwargs)


CASES = [
    _case(1, priority=Priority.HIGH, assignee_name="Bruno", co_responsible_name="Bruno",
          final_deadline="2024-05-01", secret_of_justice=True),
    _case(2, priority=Priority.HIGH, assignee_name="Bruno", co_responsible_name="Carla",
          final_deadline="2024-05-12"),
    _case(3, priority=Priority.LOW, assignee_name="", final_deadline="2024-09-01"),
    _case(4, priority=Priority.MEDIUM, assignee_name="Carla", status="Concluído",
          final_deadline="2024-01-01"),
]


def test_summary_counts_every_priority() -> None:
    summary = dashboard_service.summarize(CASES)
    assert summary.total == 4
    assert summary.by_priority == {"High": 2, "Medium": 1, "Low": 1}
    assert dashboard_service.summarize([]).by_priority == {"High": 0, "Medium": 0, "Low": 0}


def test_deadline_buckets() -> None:
    buckets = dashboard_service.deadline_buckets(CASES, TODAY)
    assert (buckets.overdue, buckets.due_soon, buckets.on_track, buckets.completed) == (1, 1, 1, 1)
    assert buckets.unset == 0


def test_global_dashboard_ranks_people() -> None:
    data = dashboard_service.global_dashboard(CASES, TODAY)
    assert data.total_cases == 4
    assert data.top_assignees[0].name == "Bruno"
    assert data.top_assignees[0].count == 2
    names = {n.name for n in data.top_co_responsibles}
    assert dashboard_service.UNDEFINED_NAME in names


def test_personal_dashboard() -> None:
    bruno = UserEntity(id=2, name="Bruno", email="bruno@firm.test")
    data = dashboard_service.personal_dashboard(CASES[:2], bruno, TODAY)
    assert data.user_name == "Bruno"
    assert data.assigned_to_me == 2
    assert data.co_responsible == 1
    assert (data.secret_of_justice, data.not_secret) == (1, 1)
    assert data.deadlines.overdue == 1
