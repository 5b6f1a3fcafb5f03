"""Deadline classification.

Maps a case's due date and status label to an urgency bucket. Pure: the
result depends only on the inputs and the reference date, and is computed
on every query rather than stored on the case.
"""

from datetime import date

from casetrack.domain.enums import DeadlineStatus
from casetrack.shared.utils.datetime import local_today, parse_calendar_date
from casetrack.shared.utils.text import fold

# Folded (lower-case, accent-free) fragments; any match means the case is closed.
TERMINAL_STATUS_KEYWORDS: tuple[str, ...] = (
    "concluido",
    "finalizado",
    "transitado em julgado",
    "arquivado",
    "concluded",
    "finished",
    "final judgment",
    "final-judgment",
    "archived",
)

DUE_SOON_DAYS = 7


def is_terminal_status(status_label: str | None) -> bool:
    """Return True if the status label marks the case as finished."""
    folded = fold(status_label)
    return any(keyword in folded for keyword in TERMINAL_STATUS_KEYWORDS)


def days_until(due_date: str | None, today: date | None = None) -> int | None:
    """Whole days from today to the due date (negative when past); None if unparseable."""
    due = parse_calendar_date(due_date)
    if due is None:
        return None
    return (due - (today or local_today())).days


def classify_deadline(
    due_date: str | None,
    status_label: str | None,
    today: date | None = None,
    due_soon_days: int = DUE_SOON_DAYS,
) -> DeadlineStatus:
    """Classify a deadline into completed / overdue / due_soon / on_track / unset.

    A terminal status wins over any date. Dates are compared at day
    granularity so a deadline falling today is due_soon, never overdue.
    Invalid dates degrade to unset instead of raising.

    Args:
        due_date: Due date string (YYYY-MM-DD, DD/MM/YYYY or ISO datetime).
        status_label: Free-form case status.
        today: Reference date; defaults to the local calendar date.
        due_soon_days: Inclusive window for due_soon.

    Returns:
        The DeadlineStatus bucket.
    """
    if is_terminal_status(status_label):
        return DeadlineStatus.COMPLETED
    remaining = days_until(due_date, today)
    if remaining is None:
        return DeadlineStatus.UNSET
    if remaining < 0:
        return DeadlineStatus.OVERDUE
    if remaining <= due_soon_days:
        return DeadlineStatus.DUE_SOON
    return DeadlineStatus.ON_TRACK


def describe_deadline(due_date: str | None, today: date | None = None) -> str | None:
    """Human label for a due date ('Due today', 'Due in 3 day(s)', 'Overdue by 2 day(s)')."""
    remaining = days_until(due_date, today)
    if remaining is None:
        return None
    if remaining < 0:
        return f"Overdue by {abs(remaining)} day(s)"
    if remaining == 0:
        return "Due today"
    return f"Due in {remaining} day(s)"
