"""Dashboard aggregates computed from a list of cases."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from datetime import date

from casetrack.application.dtos.dashboard import (
    CaseSummary,
    DeadlineBuckets,
    GlobalDashboard,
    NameCount,
    PersonalDashboard,
)
from casetrack.domain.deadlines import DUE_SOON_DAYS
from casetrack.domain.entities import CaseEntity, UserEntity
from casetrack.domain.enums import DeadlineStatus, Priority

TOP_N = 10
UNDEFINED_NAME = "Not defined"


def priority_counts(cases: Sequence[CaseEntity]) -> dict[str, int]:
    counts = Counter(c.priority for c in cases)
    return {p.value: counts.get(p, 0) for p in Priority}


def deadline_buckets(
    cases: Sequence[CaseEntity],
    today: date | None = None,
    due_soon_days: int = DUE_SOON_DAYS,
) -> DeadlineBuckets:
    counts = Counter(c.deadline_status(today, due_soon_days) for c in cases)
    return DeadlineBuckets(
        overdue=counts[DeadlineStatus.OVERDUE],
        due_soon=counts[DeadlineStatus.DUE_SOON],
        on_track=counts[DeadlineStatus.ON_TRACK],
        unset=counts[DeadlineStatus.UNSET],
        completed=counts[DeadlineStatus.COMPLETED],
    )


def _top(names: list[str], limit: int = TOP_N) -> list[NameCount]:
    return [NameCount(name=name, count=count) for name, count in Counter(names).most_common(limit)]


def summarize(cases: Sequence[CaseEntity]) -> CaseSummary:
    return CaseSummary(total=len(cases), by_priority=priority_counts(cases))


def global_dashboard(
    cases: Sequence[CaseEntity],
    today: date | None = None,
    due_soon_days: int = DUE_SOON_DAYS,
) -> GlobalDashboard:
    """Priority split, deadline buckets and the ten busiest assignees and co-responsibles."""
    return GlobalDashboard(
        total_cases=len(cases),
        by_priority=priority_counts(cases),
        deadlines=deadline_buckets(cases, today, due_soon_days),
        top_assignees=_top([c.assignee_name or UNDEFINED_NAME for c in cases]),
        top_co_responsibles=_top([c.co_responsible_name or UNDEFINED_NAME for c in cases]),
    )


def personal_dashboard(
    cases: Sequence[CaseEntity],
    user: UserEntity,
    today: date | None = None,
    due_soon_days: int = DUE_SOON_DAYS,
) -> PersonalDashboard:
    """KPIs for the cases listed for one user (normally their own active cases)."""
    secret = sum(1 for c in cases if c.secret_of_justice)
    return PersonalDashboard(
        user_name=user.name,
        assigned_to_me=sum(1 for c in cases if c.assignee_name == user.name),
        co_responsible=sum(1 for c in cases if c.co_responsible_name == user.name),
        secret_of_justice=secret,
        not_secret=len(cases) - secret,
        deadlines=deadline_buckets(cases, today, due_soon_days),
    )
