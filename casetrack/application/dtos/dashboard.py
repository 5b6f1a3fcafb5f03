"""DTOs for dashboard aggregates."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NameCount:
    name: str
    count: int


@dataclass(frozen=True)
class DeadlineBuckets:
    """Case counts per deadline status."""

    overdue: int = 0
    due_soon: int = 0
    on_track: int = 0
    unset: int = 0
    completed: int = 0


@dataclass(frozen=True)
class CaseSummary:
    """Header cards of a case list: total and per-priority counts."""

    total: int
    by_priority: dict[str, int]


@dataclass(frozen=True)
class GlobalDashboard:
    """Firm-wide figures over the given cases."""

    total_cases: int
    by_priority: dict[str, int]
    deadlines: DeadlineBuckets
    top_assignees: list[NameCount] = field(default_factory=list)
    top_co_responsibles: list[NameCount] = field(default_factory=list)


@dataclass(frozen=True)
class PersonalDashboard:
    """Counters for one user's cases."""

    user_name: str
    assigned_to_me: int
    co_responsible: int
    secret_of_justice: int
    not_secret: int
    deadlines: DeadlineBuckets
