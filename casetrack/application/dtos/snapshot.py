"""Decoded snapshot: domain objects ready to seed a workspace."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, TypeVar

from casetrack.domain.entities import CaseEntity, LookupEntity, UserEntity
from casetrack.shared.utils.text import name_key

T = TypeVar("T")


def _repeated(label: str, items: Iterable[T], key: Callable[[T], Any]) -> list[str]:
    """One message per key seen more than once; empty keys are not compared."""
    seen: set[Any] = set()
    reported: set[Any] = set()
    messages = []
    for item in items:
        value = key(item)
        if value in ("", None):
            continue
        if value in seen and value not in reported:
            reported.add(value)
            messages.append(f"duplicate {label} {value!r}")
        seen.add(value)
    return messages


@dataclass
class WorkspaceState:
    """Everything one snapshot document holds, as entities.

    extra carries top-level document keys that are not part of the model.
    """

    users: list[UserEntity] = field(default_factory=list)
    cases: list[CaseEntity] = field(default_factory=list)
    tribunals: list[LookupEntity] = field(default_factory=list)
    phases: list[LookupEntity] = field(default_factory=list)
    statuses: list[LookupEntity] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    def conflicts(self) -> list[str]:
        """Uniqueness violations a workspace cannot hold.

        Ids are unique per collection. Process numbers are compared trimmed;
        user names, emails and lookup names trimmed and case-insensitively.
        """
        messages = [
            *_repeated("case id", self.cases, lambda c: c.id),
            *_repeated("process number", self.cases, lambda c: c.process_key),
            *_repeated("user id", self.users, lambda u: u.id),
            *_repeated("user email", self.users, lambda u: u.email_key),
            *_repeated("user name", self.users, lambda u: name_key(u.name)),
        ]
        for kind, items in (
            ("tribunal", self.tribunals),
            ("phase", self.phases),
            ("status", self.statuses),
        ):
            messages += _repeated(f"{kind} id", items, lambda i: i.id)
            messages += _repeated(f"{kind} name", items, lambda i: i.name_key)
        return messages
