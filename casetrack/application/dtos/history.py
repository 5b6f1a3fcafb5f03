"""DTOs for the flattened tramitation history."""

from dataclasses import dataclass


@dataclass(frozen=True)
class HistoryRow:
    """One tramitation entry together with the case it belongs to."""

    case_id: int
    display_id: str
    process_number: str
    from_user: str
    to_user: str
    timestamp: str
    deadline: str
