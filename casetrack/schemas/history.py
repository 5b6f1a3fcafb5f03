"""Tramitation history API schemas."""

from pydantic import BaseModel, ConfigDict


class HistoryRowResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    case_id: int
    display_id: str
    process_number: str
    from_user: str
    to_user: str
    timestamp: str
    deadline: str
