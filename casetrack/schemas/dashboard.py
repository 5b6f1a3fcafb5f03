"""Dashboard API schemas."""

from pydantic import BaseModel, ConfigDict


class NameCountResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    count: int


class DeadlineBucketsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    overdue: int
    due_soon: int
    on_track: int
    unset: int
    completed: int


class CaseSummaryResponse(BaseModel):
    """Total and per-priority counts of a case list."""

    model_config = ConfigDict(from_attributes=True)

    total: int
    by_priority: dict[str, int]


class GlobalDashboardResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_cases: int
    by_priority: dict[str, int]
    deadlines: DeadlineBucketsResponse
    top_assignees: list[NameCountResponse]
    top_co_responsibles: list[NameCountResponse]


class PersonalDashboardResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_name: str
    assigned_to_me: int
    co_responsible: int
    secret_of_justice: int
    not_secret: int
    deadlines: DeadlineBucketsResponse
