"""User domain entity."""

from dataclasses import dataclass, field
from typing import Any

from casetrack.domain.enums import Permission
from casetrack.domain.exceptions import ValidationException
from casetrack.shared.utils.text import name_key


@dataclass
class UserEntity:
    """A staff member who can be assigned cases.

    Cases reference users by name (assignee, co-responsible, log entries).
    Both name and email are unique, compared trimmed and case-insensitively.
    """

    id: int
    name: str
    email: str
    permission: Permission = Permission.STANDARD
    password_hash: str | None = field(default=None, repr=False)
    extra: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate user business rules. Raises ValidationException if invalid."""
        if not self.name or not self.name.strip():
            raise ValidationException("User name is required", field="name")
        if not self.email or "@" not in self.email:
            raise ValidationException("A valid email is required", field="email")

    @property
    def email_key(self) -> str:
        return name_key(self.email)

    @property
    def is_admin(self) -> bool:
        return self.permission == Permission.ADMIN
