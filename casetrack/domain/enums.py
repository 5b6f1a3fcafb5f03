"""Domain enumerations for casetrack.

Enums represent fixed sets of domain values (priority, permission level,
deadline urgency bucket).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class Priority(_ValuesMixin, str, Enum):
    """Case priority. Ordering in listings: HIGH first."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        """Sort rank (1 = most urgent)."""
        return {"High": 1, "Medium": 2, "Low": 3}[self.value]

    @classmethod
    def parse(cls, value: str | None) -> "Priority":
        """Map English or Portuguese labels to a Priority; unknown -> LOW."""
        if not value:
            return cls.LOW
        key = value.strip().lower()
        aliases = {
            "high": cls.HIGH,
            "alta": cls.HIGH,
            "medium": cls.MEDIUM,
            "média": cls.MEDIUM,
            "media": cls.MEDIUM,
            "low": cls.LOW,
            "baixa": cls.LOW,
        }
        return aliases.get(key, cls.LOW)


class Permission(_ValuesMixin, str, Enum):
    """User permission level."""

    ADMIN = "admin"
    STANDARD = "standard"

    @classmethod
    def parse(cls, value: str | None) -> "Permission":
        """Accept legacy 'adm' / 'user' values found in older snapshots."""
        if value in ("admin", "adm"):
            return cls.ADMIN
        return cls.STANDARD


class DeadlineStatus(_ValuesMixin, str, Enum):
    """Urgency bucket computed from a due date and a status label."""

    COMPLETED = "completed"
    OVERDUE = "overdue"
    DUE_SOON = "due_soon"
    ON_TRACK = "on_track"
    UNSET = "unset"


class BoardGrouping(_ValuesMixin, str, Enum):
    """Case field a kanban board groups its columns by."""

    STATUS = "status"
    PHASE = "phase"
    ASSIGNEE = "assignee"
    CO_RESPONSIBLE = "co_responsible"
    TRIBUNAL = "tribunal"


class CaseScope(_ValuesMixin, str, Enum):
    """Partition of the case collection by archived status."""

    ACTIVE = "active"
    ARCHIVED = "archived"
    ALL = "all"
