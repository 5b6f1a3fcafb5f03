"""Permission checks: admins act on everything, standard users on their own cases."""

from __future__ import annotations

from casetrack.domain.entities import CaseEntity, UserEntity
from casetrack.domain.exceptions import AuthorizationException


def require_admin(user: UserEntity, resource: str, action: str) -> None:
    """Raise AuthorizationException unless user is an admin."""
    if not user.is_admin:
        raise AuthorizationException(resource=resource, action=action)


def can_access_case(user: UserEntity, case: CaseEntity) -> bool:
    """Admins see every case; standard users the cases assigned to their email."""
    return user.is_admin or (bool(case.assignee_email) and case.assignee_email == user.email)


def ensure_case_access(user: UserEntity, case: CaseEntity, action: str) -> None:
    if not can_access_case(user, case):
        raise AuthorizationException(resource="case", action=action)
